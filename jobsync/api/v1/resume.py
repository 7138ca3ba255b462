import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile
from pydantic import BaseModel, Field

from jobsync.api.v1.deps import get_user_store
from jobsync.core.errors import ValidationError
from jobsync.core.rate_limit import rate_limit
from jobsync.matching import analyze_resume
from jobsync.parsing.extract import MAX_DOCUMENT_BYTES, extract_document_text
from jobsync.schemas import ProgressEntry, StoredAnalysis
from jobsync.storage import UserDataStore

router = APIRouter()
logger = logging.getLogger(__name__)


class ResumeAnalyzeRequest(BaseModel):
    resume_text: str = Field(default="", max_length=200000, alias="resumeText")
    job_description_text: str = Field(default="", max_length=200000, alias="jobDescriptionText")
    file_name: str | None = Field(default=None, max_length=255, alias="fileName")
    jd_file_name: str | None = Field(default=None, max_length=255, alias="jdFileName")

    model_config = {"populate_by_name": True}


def _analyze_and_save(
    store: UserDataStore,
    resume_text: str,
    jd_text: str,
    *,
    file_name: str | None,
    jd_file_name: str | None,
) -> StoredAnalysis:
    analysis = analyze_resume(resume_text, jd_text)
    stored = store.save_resume_analysis(analysis, file_name=file_name, jd_file_name=jd_file_name)
    store.save_progress_entry(
        ProgressEntry(
            resume_score=analysis.overall_score,
            interview_score=0,
            overall_score=analysis.overall_score,
        )
    )
    logger.info("resume_analyze user_id=%s analysis_id=%s", store.user_id, stored.id)
    return stored


@router.post("/resume/analyze", response_model=StoredAnalysis, response_model_by_alias=True)
@rate_limit()
def analyze(
    request: Request,
    payload: ResumeAnalyzeRequest,
    store: UserDataStore = Depends(get_user_store),
):
    _ = request
    return _analyze_and_save(
        store,
        payload.resume_text,
        payload.job_description_text,
        file_name=payload.file_name,
        jd_file_name=payload.jd_file_name,
    )


async def _read_upload(upload: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await upload.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > MAX_DOCUMENT_BYTES:
            raise ValidationError("File size must be less than 5MB", status_code=413)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resume/analyze-files", response_model=StoredAnalysis, response_model_by_alias=True)
@rate_limit()
async def analyze_files(
    request: Request,
    resume: UploadFile = File(...),
    job_description: UploadFile = File(..., alias="jobDescription"),
    store: UserDataStore = Depends(get_user_store),
):
    _ = request
    resume_name = resume.filename or "resume.txt"
    jd_name = job_description.filename or "job-description.txt"
    resume_text = extract_document_text(resume_name, await _read_upload(resume))
    jd_text = extract_document_text(jd_name, await _read_upload(job_description))
    return _analyze_and_save(store, resume_text, jd_text, file_name=resume_name, jd_file_name=jd_name)


@router.get("/resume/latest", response_model=StoredAnalysis | None, response_model_by_alias=True)
def latest(store: UserDataStore = Depends(get_user_store)):
    return store.get_latest_resume_analysis()


@router.get("/resume/history", response_model=list[StoredAnalysis], response_model_by_alias=True)
def history(store: UserDataStore = Depends(get_user_store)):
    return store.get_all_resume_analyses()
