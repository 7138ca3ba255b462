from fastapi import APIRouter, Request

from jobsync.api.v1.deps import get_store

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the service and its database.")
def health_check(request: Request):
    database = "ok" if get_store(request).ping() else "unavailable"
    return {"status": "healthy" if database == "ok" else "degraded", "database": database}
