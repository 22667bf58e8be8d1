"""Interface de linha de comando para operar a Vitrine."""
from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from vitrine.api import run as run_api
from vitrine.container import build_container
from vitrine.domain.errors import ApiError
from vitrine.settings import get_log_level


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vitrine - API de conteúdo do blog")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Executa a API HTTP com o Uvicorn")

    warm = subparsers.add_parser(
        "warm-cache", help="Busca todos os artigos no CMS e informa o total"
    )
    warm.add_argument(
        "--force", action="store_true", help="Ignora o cache e consulta o CMS"
    )

    latest = subparsers.add_parser("latest", help="Lista os artigos mais recentes")
    latest.add_argument("--limit", type=int, default=10, help="Quantidade (padrão 10)")

    trending = subparsers.add_parser("trending", help="Lista os artigos em alta")
    trending.add_argument("--limit", type=int, default=10, help="Quantidade (padrão 10)")

    subparsers.add_parser("categories", help="Lista as categorias derivadas das tags")
    subparsers.add_parser("products", help="Lista os produtos publicados na loja")

    for sp in (warm, latest, trending):
        sp.add_argument(
            "--log-level",
            default=None,
            help="Nível de log: DEBUG, INFO, WARNING, ERROR (padrão INFO)",
        )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = getattr(args, "log_level", None) or get_log_level()
    handler = RichHandler(console=console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    if args.command == "serve":
        run_api()
        return

    container = build_container()
    service = container.articles.aggregation_service
    try:
        if args.command == "warm-cache":
            articles = service.fetch_and_cache_all(force_refresh=args.force)
            console.print(f"[green]{len(articles)} artigos carregados no cache.[/green]")
        elif args.command == "latest":
            items = service.latest(args.limit)
            if not items:
                console.print("[yellow]Nenhum artigo encontrado.[/yellow]")
            for item in items:
                console.print_json(
                    data={
                        "slug": item.article.slug,
                        "titulo": item.article.title,
                        "publicado_em": item.article.published_at.isoformat(),
                        "dias": item.days_since_published,
                        "novo": item.is_new,
                    }
                )
        elif args.command == "trending":
            items = service.trending(args.limit)
            if not items:
                console.print("[yellow]Nenhum artigo encontrado.[/yellow]")
            for item in items:
                console.print_json(
                    data={
                        "slug": item.article.slug,
                        "titulo": item.article.title,
                        "visualizacoes": item.article.views,
                        "pontuacao": item.trending_score,
                    }
                )
        elif args.command == "categories":
            categories = container.categories.category_service.list_categories()
            if not categories:
                console.print("[yellow]Nenhuma categoria encontrada.[/yellow]")
            else:
                table = Table("Slug", "Nome", "Artigos")
                for category in categories:
                    table.add_row(category.slug, category.name, str(category.article_count))
                console.print(table)
        elif args.command == "products":
            products = container.store.product_service.list_products()
            if not products:
                console.print("[yellow]Nenhum produto publicado.[/yellow]")
            else:
                table = Table("Slug", "Nome", "Preço", "Tipo")
                for product in products:
                    table.add_row(
                        product.slug, product.name, product.formatted_price, product.product_type
                    )
                console.print(table)
    except ApiError as exc:
        logging.getLogger("vitrine.cli").error("Falha ao executar '%s': %s", args.command, exc)
        console.print(f"[red]{exc.message}[/red]")
    finally:
        container.close()


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
