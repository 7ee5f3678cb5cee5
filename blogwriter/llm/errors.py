from typing import Any


class GenerationError(Exception):
    """Base exception for generative-API failures."""


class AuthError(GenerationError):
    """401/403: missing, invalid or unauthorized API key."""


class NotFound(GenerationError):
    """404: unknown model or endpoint."""


class RateLimited(GenerationError):
    """429: quota or rate limit exceeded."""


class ServerError(GenerationError):
    """5xx server-side error."""


class BadRequest(GenerationError):
    """Any other 4xx, e.g. a rejected prompt or malformed payload."""


def raise_for_status(status_code: int, message: str = "", payload: Any = None):
    if 200 <= status_code < 300:
        return

    detail = message or ""
    # some Google endpoints wrap the error object in a one-element list
    if isinstance(payload, list):
        payload = payload[0] if payload else None
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict):
            err_message = err.get("message") or ""
            err_status = err.get("status") or ""
        else:
            err_message = str(err or "")
            err_status = ""
        if err_message or err_status:
            detail = f"{detail} {err_status} {err_message}".strip()

    if status_code in (401, 403):
        raise AuthError(detail)
    if status_code == 404:
        raise NotFound(detail)
    if status_code == 429:
        raise RateLimited(detail)
    if 500 <= status_code < 600:
        raise ServerError(detail)
    if 400 <= status_code < 500:
        raise BadRequest(detail)
    raise GenerationError(f"{detail} (unexpected status {status_code})".strip())
