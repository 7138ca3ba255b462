from __future__ import annotations

import json
import logging
import os
import secrets
import sqlite3
import threading
from datetime import datetime, timezone

from jobsync.core.errors import DuplicateUserError, InvalidCredentialsError, NotAuthenticatedError
from jobsync.schemas import (
    AnalysisResult,
    InterviewResult,
    ProgressEntry,
    StoredAnalysis,
    StoredInterviewResult,
    UserRecord,
)

logger = logging.getLogger(__name__)

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        email TEXT NOT NULL UNIQUE,
        name TEXT NOT NULL,
        password TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS resume_analyses (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        created_at TEXT NOT NULL,
        file_name TEXT,
        jd_file_name TEXT,
        payload_json TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS interview_results (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        created_at TEXT NOT NULL,
        payload_json TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS progress_entries (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        date TEXT NOT NULL,
        resume_score INTEGER NOT NULL,
        interview_score INTEGER NOT NULL,
        overall_score INTEGER NOT NULL,
        timestamp TEXT NOT NULL
    );
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_resume_analyses_user
    ON resume_analyses (user_id, id);
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_interview_results_user
    ON interview_results (user_id, id);
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_progress_entries_user
    ON progress_entries (user_id, id);
    """,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _short_date(moment: datetime) -> str:
    return f"{moment:%b} {moment.day}"


class SQLiteStore:
    """Account registry plus per-user record storage in one SQLite database.

    Credentials are stored as plain text. This is a practice-tool stand-in,
    not an authentication system.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        if db_path != ":memory:":
            directory = os.path.dirname(db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(
            db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        if db_path != ":memory:":
            self._conn.execute("PRAGMA journal_mode=WAL;")
            self._conn.execute("PRAGMA synchronous=NORMAL;")
        self._conn.execute("PRAGMA busy_timeout=5000;")
        for statement in _SCHEMA:
            self._conn.execute(statement)

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def ping(self) -> bool:
        try:
            return self._fetchone("SELECT 1") == (1,)
        except sqlite3.Error as exc:
            logger.warning("store_ping_failed: %s", exc)
            return False

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._lock:
            cur = self._conn.execute(sql, params)
            self._conn.commit()
            return cur

    def _fetchall(self, sql: str, params: tuple = ()) -> list[tuple]:
        with self._lock:
            return self._conn.execute(sql, params).fetchall()

    def _fetchone(self, sql: str, params: tuple = ()) -> tuple | None:
        with self._lock:
            return self._conn.execute(sql, params).fetchone()

    # Accounts

    def register_user(self, email: str, password: str, name: str = "") -> UserRecord:
        email = (email or "").strip()
        if not email:
            raise InvalidCredentialsError("Email is required")
        if self._fetchone("SELECT id FROM users WHERE email = ?", (email,)):
            raise DuplicateUserError()
        user = UserRecord(
            id=f"user_{secrets.token_hex(8)}",
            email=email,
            name=name or "",
            created_at=_utc_now(),
        )
        try:
            self._execute(
                "INSERT INTO users (id, email, name, password, created_at) VALUES (?, ?, ?, ?, ?)",
                (user.id, user.email, user.name, password, user.created_at.isoformat()),
            )
        except sqlite3.IntegrityError as exc:
            raise DuplicateUserError() from exc
        logger.info("user_registered user_id=%s", user.id)
        return user

    def login_user(self, email: str, password: str) -> UserRecord:
        row = self._fetchone(
            "SELECT id, email, name, password, created_at FROM users WHERE email = ?",
            ((email or "").strip(),),
        )
        if row is None or row[3] != password:
            raise InvalidCredentialsError()
        return UserRecord(id=row[0], email=row[1], name=row[2], created_at=datetime.fromisoformat(row[4]))

    def get_user(self, user_id: str) -> UserRecord | None:
        row = self._fetchone("SELECT id, email, name, created_at FROM users WHERE id = ?", (user_id,))
        if row is None:
            return None
        return UserRecord(id=row[0], email=row[1], name=row[2], created_at=datetime.fromisoformat(row[3]))

    def for_user(self, user_id: str | None) -> UserDataStore:
        if not user_id or self.get_user(user_id) is None:
            raise NotAuthenticatedError()
        return UserDataStore(self, user_id)


class UserDataStore:
    """PersistenceStore bound to one registered user."""

    def __init__(self, store: SQLiteStore, user_id: str) -> None:
        self._store = store
        self.user_id = user_id

    def save_resume_analysis(
        self,
        analysis: AnalysisResult,
        *,
        file_name: str | None = None,
        jd_file_name: str | None = None,
    ) -> StoredAnalysis:
        created_at = _utc_now()
        payload = AnalysisResult.model_validate(analysis.model_dump()).model_dump_json(by_alias=True)
        cur = self._store._execute(
            """
            INSERT INTO resume_analyses (user_id, created_at, file_name, jd_file_name, payload_json)
            VALUES (?, ?, ?, ?, ?)
            """,
            (self.user_id, created_at.isoformat(), file_name, jd_file_name, payload),
        )
        logger.info("resume_analysis_saved user_id=%s id=%s", self.user_id, cur.lastrowid)
        return self._analysis_from_row((cur.lastrowid, created_at.isoformat(), file_name, jd_file_name, payload))

    def get_latest_resume_analysis(self) -> StoredAnalysis | None:
        row = self._store._fetchone(
            """
            SELECT id, created_at, file_name, jd_file_name, payload_json
            FROM resume_analyses
            WHERE user_id = ?
            ORDER BY id DESC
            LIMIT 1
            """,
            (self.user_id,),
        )
        return self._analysis_from_row(row) if row else None

    def get_all_resume_analyses(self) -> list[StoredAnalysis]:
        rows = self._store._fetchall(
            """
            SELECT id, created_at, file_name, jd_file_name, payload_json
            FROM resume_analyses
            WHERE user_id = ?
            ORDER BY id ASC
            """,
            (self.user_id,),
        )
        return [self._analysis_from_row(row) for row in rows]

    def save_interview_results(self, result: InterviewResult) -> StoredInterviewResult:
        created_at = _utc_now()
        payload = InterviewResult.model_validate(result.model_dump()).model_dump_json(by_alias=True)
        cur = self._store._execute(
            "INSERT INTO interview_results (user_id, created_at, payload_json) VALUES (?, ?, ?)",
            (self.user_id, created_at.isoformat(), payload),
        )
        logger.info("interview_result_saved user_id=%s id=%s", self.user_id, cur.lastrowid)
        return self._interview_from_row((cur.lastrowid, created_at.isoformat(), payload))

    def get_all_interview_results(self) -> list[StoredInterviewResult]:
        rows = self._store._fetchall(
            """
            SELECT id, created_at, payload_json
            FROM interview_results
            WHERE user_id = ?
            ORDER BY id ASC
            """,
            (self.user_id,),
        )
        return [self._interview_from_row(row) for row in rows]

    def save_progress_entry(self, entry: ProgressEntry) -> ProgressEntry:
        now = _utc_now()
        stored = entry.model_copy(
            update={
                "date": entry.date or _short_date(now),
                "timestamp": entry.timestamp or now,
            }
        )
        self._store._execute(
            """
            INSERT INTO progress_entries (
                user_id, date, resume_score, interview_score, overall_score, timestamp
            ) VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                self.user_id,
                stored.date,
                stored.resume_score,
                stored.interview_score,
                stored.overall_score,
                stored.timestamp.isoformat(),
            ),
        )
        return stored

    def get_user_progress(self) -> list[ProgressEntry]:
        rows = self._store._fetchall(
            """
            SELECT date, resume_score, interview_score, overall_score, timestamp
            FROM progress_entries
            WHERE user_id = ?
            ORDER BY id ASC
            """,
            (self.user_id,),
        )
        return [
            ProgressEntry(
                date=row[0],
                resume_score=row[1],
                interview_score=row[2],
                overall_score=row[3],
                timestamp=datetime.fromisoformat(row[4]),
            )
            for row in rows
        ]

    @staticmethod
    def _analysis_from_row(row: tuple) -> StoredAnalysis:
        data = json.loads(row[4])
        data.update(
            {
                "id": f"analysis_{row[0]}",
                "timestamp": row[1],
                "fileName": row[2],
                "jdFileName": row[3],
            }
        )
        return StoredAnalysis.model_validate(data)

    @staticmethod
    def _interview_from_row(row: tuple) -> StoredInterviewResult:
        data = json.loads(row[2])
        data.update({"id": f"interview_{row[0]}", "timestamp": row[1]})
        return StoredInterviewResult.model_validate(data)
