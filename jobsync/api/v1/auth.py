from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from jobsync.api.v1.deps import api_key_guard, get_store
from jobsync.core.config import settings
from jobsync.core.errors import ValidationError
from jobsync.core.rate_limit import rate_limit
from jobsync.schemas import UserRecord

router = APIRouter()


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(max_length=200)
    confirm_password: str | None = Field(default=None, alias="confirmPassword")
    name: str = Field(default="", max_length=200)

    model_config = {"populate_by_name": True}


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(max_length=200)


def _check_password(password: str) -> None:
    if len(password) < 6:
        raise ValidationError("Password must be at least 6 characters long.")


@router.post("/auth/register", response_model=UserRecord, response_model_by_alias=True)
@rate_limit(settings.auth_rate_limit)
def register(request: Request, payload: RegisterRequest, _: None = Depends(api_key_guard)):
    _check_password(payload.password)
    if payload.confirm_password is not None and payload.confirm_password != payload.password:
        raise ValidationError("Passwords do not match.")
    return get_store(request).register_user(payload.email, payload.password, payload.name)


@router.post("/auth/login", response_model=UserRecord, response_model_by_alias=True)
@rate_limit(settings.auth_rate_limit)
def login(request: Request, payload: LoginRequest, _: None = Depends(api_key_guard)):
    _check_password(payload.password)
    return get_store(request).login_user(payload.email, payload.password)
