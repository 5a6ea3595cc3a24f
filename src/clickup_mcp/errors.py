import re


class ClickUpError(Exception):
    pass


class MissingCredentials(ClickUpError):
    pass  # no remote call attempted


class AuthError(ClickUpError):
    pass  # 401


class PermissionDenied(ClickUpError):
    pass  # 403


class NotFound(ClickUpError):
    pass  # 404


class ValidationError(ClickUpError):
    pass  # 400, 422


class RateLimited(ClickUpError):
    pass  # 429


class ServerError(ClickUpError):
    pass  # 5xx


class ApiError(ClickUpError):
    pass


_STATUS_ERRORS = {
    400: ValidationError,
    401: AuthError,
    403: PermissionDenied,
    404: NotFound,
    422: ValidationError,
    429: RateLimited,
}


def _sanitize_message(msg: str, max_length: int = 300) -> str:
    """
    Sanitize error messages to prevent leaking secrets.

    Args:
        msg: Raw error message
        max_length: Maximum message length (default: 300)

    Returns:
        Sanitized and truncated message
    """
    msg = msg[:max_length]

    secret_patterns = [
        (r'api_?key["\s:=]+[a-zA-Z0-9_\-\.]+', "[REDACTED_API_KEY]"),
        (r'token["\s:=]+[a-zA-Z0-9_\-\.]+', "[REDACTED_TOKEN]"),
        (r'authorization["\s:=]+[^\s"\']+', "[REDACTED_AUTH]"),
        (r"bearer\s+[a-zA-Z0-9_\-\.]+", "[REDACTED_BEARER_TOKEN]"),
        # ClickUp personal tokens
        (r"pk_[a-zA-Z0-9_]+", "[REDACTED_TOKEN]"),
    ]

    for pattern, replacement in secret_patterns:
        msg = re.sub(pattern, replacement, msg, flags=re.IGNORECASE)

    return msg


def http_error(status_code: int, message: str = "") -> ClickUpError:
    """Build the exception for a non-success HTTP status code."""
    detail = f"ClickUp API error: {status_code} - {_sanitize_message(message)}"
    if status_code >= 500:
        return ServerError(detail)
    return _STATUS_ERRORS.get(status_code, ApiError)(detail)


def map_http_error(status_code: int, message: str = "") -> None:
    """Map HTTP status codes to custom exceptions."""
    if status_code >= 400:
        raise http_error(status_code, message)
