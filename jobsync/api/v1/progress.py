from fastapi import APIRouter, Depends

from jobsync.api.v1.deps import get_user_store
from jobsync.presentation import DashboardView, build_dashboard
from jobsync.schemas import ProgressEntry
from jobsync.storage import UserDataStore

router = APIRouter()


@router.get("/progress", response_model=list[ProgressEntry], response_model_by_alias=True)
def progress(store: UserDataStore = Depends(get_user_store)):
    return store.get_user_progress()


@router.get("/dashboard", response_model=DashboardView, response_model_by_alias=True)
def dashboard(store: UserDataStore = Depends(get_user_store)):
    return build_dashboard(store)
