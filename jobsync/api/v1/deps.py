from __future__ import annotations

from fastapi import Header, Request

from jobsync.core.config import settings
from jobsync.core.security import check_api_key
from jobsync.storage import SQLiteStore, UserDataStore


def get_store(request: Request) -> SQLiteStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        store = SQLiteStore(settings.db_path)
        request.app.state.store = store
    return store


def api_key_guard(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    check_api_key(x_api_key)


def get_user_store(
    request: Request,
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> UserDataStore:
    check_api_key(x_api_key)
    return get_store(request).for_user(x_user_id)
