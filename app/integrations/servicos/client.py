from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Literal, Optional

import httpx

from app.utils.logger import logger

ApiExterna = Literal["pagamento", "producao"]
MetodoHttp = Literal["get", "post", "put", "patch", "delete"]


class IHttpClient(ABC):
    """Contrato do colaborador HTTP externo (serviços de pagamento e produção)."""

    @abstractmethod
    async def executar_chamada(
        self,
        api: ApiExterna,
        method: MetodoHttp,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        raise NotImplementedError


class HttpClient(IHttpClient):
    """Cliente HTTP simples para os serviços de pagamento e produção."""

    def __init__(
        self,
        *,
        url_base_pagamento: str = "",
        url_base_producao: str = "",
        timeout: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url_base_pagamento = url_base_pagamento
        self.url_base_producao = url_base_producao
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    def montar_url(self, api: ApiExterna, path: str) -> str:
        base = self.url_base_pagamento if api == "pagamento" else self.url_base_producao
        return f"{base}{path}"

    async def executar_chamada(
        self,
        api: ApiExterna,
        method: MetodoHttp,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        url = self.montar_url(api, path)
        logger.info(f"[HTTP] {method.upper()} {url}")

        if method in ("get", "delete"):
            resp = await self._client.request(method.upper(), url)
        elif method in ("post", "put", "patch"):
            resp = await self._client.request(method.upper(), url, json=body)
        else:
            raise ValueError(f"Método HTTP não suportado: {method}")

        resp.raise_for_status()
        return resp
