from starlette.datastructures import URL, QueryParams

from authflow.core.config import settings

def reset_token_from_query(query: str, param: str | None = None) -> str | None:
    """Return the reset token from a raw query string, or None when absent/empty."""
    value = QueryParams(query).get(param or settings.RESET_TOKEN_PARAM)
    return value or None

def reset_token_from_url(url: str, param: str | None = None) -> str | None:
    return reset_token_from_query(URL(url).query, param)
