"""
Error types shared by the API layer and the AI adapter.
Each carries the HTTP status it maps to in the error envelope.
"""


class InterviewPrepError(Exception):
    """Base error for the interview prep API"""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(InterviewPrepError):
    """A required setting (e.g. the AI credential) is missing"""

    status_code = 500


class ValidationError(InterviewPrepError):
    status_code = 400


class AuthError(InterviewPrepError):
    status_code = 401


class NotFoundError(InterviewPrepError):
    status_code = 404


class UpstreamParseError(InterviewPrepError):
    """The AI reply held no parsable JSON object. Recovered locally, never sent to clients."""

    status_code = 502
