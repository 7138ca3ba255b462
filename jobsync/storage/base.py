from __future__ import annotations

from typing import Protocol

from jobsync.schemas import (
    AnalysisResult,
    InterviewResult,
    ProgressEntry,
    StoredAnalysis,
    StoredInterviewResult,
)


class PersistenceStore(Protocol):
    """Per-user record store. Insertion order is preserved and the latest record is the last one."""

    def save_resume_analysis(
        self,
        analysis: AnalysisResult,
        *,
        file_name: str | None = None,
        jd_file_name: str | None = None,
    ) -> StoredAnalysis: ...

    def get_latest_resume_analysis(self) -> StoredAnalysis | None: ...

    def save_interview_results(self, result: InterviewResult) -> StoredInterviewResult: ...

    def get_all_interview_results(self) -> list[StoredInterviewResult]: ...

    def save_progress_entry(self, entry: ProgressEntry) -> ProgressEntry: ...

    def get_user_progress(self) -> list[ProgressEntry]: ...
