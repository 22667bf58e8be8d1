"""Rotas FastAPI da loja de produtos digitais."""
from __future__ import annotations

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse

from vitrine.domain.errors import NotFoundError, require_slug
from vitrine.services.envelope import respond
from vitrine.services.schemas import map_product
from vitrine.services.store import StoreContainer

PRODUCTS_TTL = 300


def include_routes(app: FastAPI, container: StoreContainer, *, prefix: str = "") -> None:
    """Registra as rotas da loja na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Loja"])
    service = container.product_service

    @router.get("/products")
    def list_products() -> JSONResponse:
        products = service.list_products()
        return respond([map_product(product) for product in products], cache_ttl=PRODUCTS_TTL)

    @router.get("/products/{slug}")
    def get_product(slug: str) -> JSONResponse:
        product = service.get_product(require_slug(slug, "Product"))
        if product is None:
            raise NotFoundError.for_resource("Product")
        return respond(map_product(product), cache_ttl=PRODUCTS_TTL)

    app.include_router(router)


__all__ = ["include_routes"]
