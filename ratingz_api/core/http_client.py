import httpx

from ratingz_api.core.config import settings

_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """
    Singleton httpx-клиент для исходящих вызовов (IP-lookup).
    """
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=settings.ip_lookup_timeout,
            headers={"User-Agent": f"{settings.app_name}/1.0"},
        )
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
