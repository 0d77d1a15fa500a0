from .client import WordsApiClient, ApiError, DEFAULT_BASE_URL, DEFAULT_TIMEOUT

__all__ = ["WordsApiClient", "ApiError", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
