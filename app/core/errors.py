from __future__ import annotations

from typing import Any

from fastapi import status


class AnalysisError(RuntimeError):
    """Base class for every failure that ends a resume analysis request.

    Subclasses fix the HTTP status and the user-facing message. ``details``
    carries raw diagnostic text (usually an upstream exception message); it is
    only rendered to the caller in development posture.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "analysis_failed"
    default_message: str = "Failed to analyze resume. Please try again later."

    def __init__(self, message: str | None = None, *, details: str | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_payload(self, *, include_details: bool) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if include_details and self.details:
            payload["details"] = self.details
        return payload


class MissingFile(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "missing_file"
    default_message = "No file uploaded"


class UnsupportedType(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "unsupported_type"
    default_message = "Only PDF files are allowed"


class TooLarge(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "too_large"
    default_message = "File size exceeds 10MB limit"


class ExtractionFailed(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "extraction_failed"
    default_message = "Could not read the PDF file. It may be corrupted or password-protected."


class EmptyText(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "empty_text"
    default_message = "Could not extract text from PDF. Please ensure the file contains readable text."


class MissingCredential(AnalysisError):
    code = "missing_credential"
    default_message = "Google API key not configured. Please set GOOGLE_API_KEY environment variable."


class AuthError(AnalysisError):
    code = "upstream_auth"
    default_message = "Invalid Google API key. Please check your configuration."


class QuotaExceeded(AnalysisError):
    code = "upstream_quota"
    default_message = "API quota exceeded. Please try again later."


class UpstreamError(AnalysisError):
    code = "upstream_error"


class EmptyResponse(AnalysisError):
    code = "empty_response"
    default_message = "Failed to generate analysis from Gemini API."


class InvalidRequest(AnalysisError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_request"
    default_message = "Invalid request"


class RateLimited(AnalysisError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    code = "rate_limited"
    default_message = "Too many requests. Please try again later."
