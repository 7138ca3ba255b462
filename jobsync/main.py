import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from jobsync.api.v1.auth import router as auth_router
from jobsync.api.v1.health import router as health_router
from jobsync.api.v1.interview import router as interview_router
from jobsync.api.v1.progress import router as progress_router
from jobsync.api.v1.resume import router as resume_router
from jobsync.core.config import settings
from jobsync.core.errors import JobSyncError
from jobsync.core.lifespan import lifespan
from jobsync.core.rate_limit import limiter

logging.basicConfig(level=settings.log_level, format="%(message)s")
logger = logging.getLogger(__name__)
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="JobSync API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(JobSyncError)
async def _jobsync_error_handler(request: Request, exc: JobSyncError):
    logger.info("request_rejected path=%s status=%s detail=%s", request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(auth_router, prefix="/v1", tags=["Auth"])
app.include_router(resume_router, prefix="/v1", tags=["Resume"])
app.include_router(interview_router, prefix="/v1", tags=["Interview"])
app.include_router(progress_router, prefix="/v1", tags=["Progress"])
