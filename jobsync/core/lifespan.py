from contextlib import asynccontextmanager
import logging

from jobsync.core.config import settings
from jobsync.storage import SQLiteStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = getattr(app.state, "store", None)
    owns_store = store is None
    if owns_store:
        store = SQLiteStore(settings.db_path)
        app.state.store = store
        logger.info("store_opened path=%s", settings.db_path)
    app.state.practices = {}
    yield
    app.state.practices = {}
    if owns_store:
        store.close()
        app.state.store = None
        logger.info("store_closed path=%s", settings.db_path)
