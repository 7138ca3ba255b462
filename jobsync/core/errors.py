from __future__ import annotations


class JobSyncError(RuntimeError):
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(JobSyncError):
    """Caller supplied input that can be corrected and retried."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code=status_code)


class DuplicateUserError(ValidationError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(message, status_code=409)


class InvalidCredentialsError(ValidationError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, status_code=401)


class NotAuthenticatedError(ValidationError):
    def __init__(self, message: str = "No user logged in"):
        super().__init__(message, status_code=401)
