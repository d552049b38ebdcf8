from fastapi import status


class AppError(Exception):
    """Base for errors reported to the caller as ``{"errors": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamFailure(AppError):
    """Image storage or payment provider call failed.

    The status depends on the call site: a failed image upload is the
    caller's problem (400), a failed payment intent is ours (500).
    """


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
