"""Cliente HTTP do catálogo de produtos digitais."""
from __future__ import annotations

import logging
from typing import Sequence

import httpx

from vitrine.domain import CatalogGateway, Product
from vitrine.domain.errors import UpstreamUnavailable


class GumroadCatalogClient(CatalogGateway):
    """Lista produtos publicados através da API REST do catálogo."""

    def __init__(
        self,
        base_url: str,
        access_token: str | None,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        """URL base normalizada sem barra final."""

        self._access_token = access_token
        """Token de acesso enviado como parâmetro da consulta."""

        self._client: httpx.Client = client or httpx.Client(
            base_url=self._base_url, timeout=timeout
        )
        """Cliente HTTP responsável pelas consultas ao catálogo."""

        self._owns_client: bool = client is None
        """Indica se o cliente HTTP deve ser fechado por esta classe."""

        self._log = logger or logging.getLogger("vitrine.gumroad")

    def list_products(self) -> Sequence[Product]:
        """Retorna apenas os produtos publicados, já normalizados."""

        if not self._access_token:
            raise UpstreamUnavailable("Gumroad access token not configured")
        try:
            response = self._client.get(
                f"{self._base_url}/v2/products",
                params={"access_token": self._access_token},
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            self._log.error("Catálogo respondeu com status %s", exc.response.status_code)
            raise UpstreamUnavailable("Failed to fetch products") from exc
        except httpx.HTTPError as exc:
            self._log.error("Falha de comunicação com o catálogo: %s", exc)
            raise UpstreamUnavailable("Failed to fetch products") from exc
        except ValueError as exc:
            raise UpstreamUnavailable("Invalid catalog API response") from exc

        if not isinstance(body, dict):
            raise UpstreamUnavailable("Invalid catalog API response")
        if not body.get("success"):
            raise UpstreamUnavailable(body.get("message") or "Failed to fetch products")
        try:
            products = [
                Product.from_mapping(item)
                for item in body.get("products") or ()
                if item.get("published")
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            self._log.error("Produto malformado retornado pelo catálogo: %s", exc)
            raise UpstreamUnavailable("Invalid catalog API response") from exc
        self._log.debug("%d produtos publicados obtidos do catálogo", len(products))
        return products

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["GumroadCatalogClient"]
