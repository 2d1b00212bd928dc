"""Domain exceptions and API error reporting for the pipeline."""

import httpx
import structlog

logger = structlog.get_logger()


class ConfigurationError(RuntimeError):
    """Raised when required credentials are missing."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.missing)
        )


class StageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(self, *, stage: str, detail: str):
        super().__init__(detail)
        self.stage = stage
        self.detail = detail


class NewsAPIError(RuntimeError):
    """Error payload returned by NewsAPI (``{"status": "error", ...}``)."""

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


def log_api_error(error: Exception, service: str) -> None:
    """
    Log the details of a failed API call.

    Works with httpx, OpenAI and ElevenLabs exceptions: when the error
    carries an HTTP status and body they are logged, otherwise just the
    message.
    """
    response = getattr(error, "response", None)
    status = getattr(error, "status_code", None) or getattr(response, "status_code", None)
    body = getattr(error, "body", None)
    if body is None and response is not None:
        try:
            body = response.text
        except httpx.ResponseNotRead:
            body = None

    if status is not None:
        logger.error(f"{service} API error", status=status, body=body, error=str(error))
    elif isinstance(error, NewsAPIError):
        logger.error(f"{service} API error", code=error.code, error=error.message)
    else:
        logger.error(f"{service} request failed", error=str(error))
