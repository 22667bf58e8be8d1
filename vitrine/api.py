"""Ponto de entrada REST que agrega os serviços da Vitrine."""
from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from vitrine.container import Container, build_container
from vitrine.services.articles.api import include_routes as include_articles_routes
from vitrine.services.categories.api import include_routes as include_categories_routes
from vitrine.services.envelope import configure_cors, configure_error_handlers
from vitrine.services.store.api import include_routes as include_store_routes
from vitrine.settings import get_api_bind_host, get_api_port, get_cors_origins


def create_app(container: Container | None = None) -> FastAPI:
    """Cria a aplicação FastAPI com todas as rotas de serviços configuradas.

    O container, e com ele o cache de processo, é criado junto com a aplicação
    e encerrado no desligamento.
    """

    container = container or build_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        container.close()

    app = FastAPI(
        title="Vitrine API",
        version="1.0.0",
        description=(
            "Artigos, categorias e produtos do blog servidos a partir de um "
            "cache em memória sobre o CMS e o catálogo da loja."
        ),
        lifespan=lifespan,
    )
    app.state.container = container
    configure_cors(app, get_cors_origins())
    configure_error_handlers(app)
    include_articles_routes(app, container.articles)
    include_categories_routes(app, container.categories)
    include_store_routes(app, container.store)
    return app


def run() -> None:
    """Executa a API agregada utilizando o Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "vitrine.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
    )


__all__ = ["create_app", "run"]
