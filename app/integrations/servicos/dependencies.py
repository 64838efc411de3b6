from app.config.settings import URL_BASE_PAGAMENTO, URL_BASE_PRODUCAO, HTTP_TIMEOUT_SECONDS
from app.integrations.servicos.client import HttpClient, IHttpClient

_http_client: HttpClient | None = None


def get_http_client() -> IHttpClient:
    """Instância única do cliente HTTP (reaproveita o pool de conexões)."""
    global _http_client
    if _http_client is None:
        _http_client = HttpClient(
            url_base_pagamento=URL_BASE_PAGAMENTO,
            url_base_producao=URL_BASE_PRODUCAO,
            timeout=HTTP_TIMEOUT_SECONDS,
        )
    return _http_client


async def fechar_http_client() -> None:
    global _http_client
    if _http_client is not None:
        await _http_client.close()
        _http_client = None
