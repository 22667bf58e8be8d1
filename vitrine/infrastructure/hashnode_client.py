"""Cliente GraphQL responsável por consultar artigos no CMS."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from vitrine.domain import Article, ArticleFilter, Author, ContentGateway, Tag
from vitrine.domain.entities.article import estimate_reading_time, parse_timestamp
from vitrine.domain.errors import UpstreamUnavailable

_PAGE_SIZE = 50

_POST_FIELDS = """
            id
            title
            brief
            slug
            publishedAt
            views
            reactionCount
            readTimeInMinutes
            content { markdown }
            coverImage { url }
            tags { id name slug logo }
            author { name profilePicture }
"""

GET_ARTICLES = (
    """
  query GetArticles($host: String!, $first: Int!, $after: String, $filter: PublicationPostConnectionFilter) {
    publication(host: $host) {
      posts(first: $first, after: $after, filter: $filter) {
        edges {
          node {"""
    + _POST_FIELDS
    + """          }
        }
        pageInfo { hasNextPage endCursor }
      }
    }
  }
"""
)

GET_ARTICLE_TAGS = """
  query GetArticleTags($host: String!, $slug: String!) {
    publication(host: $host) {
      post(slug: $slug) {
        tags { id name slug logo }
      }
    }
  }
"""


class HashnodeContentClient(ContentGateway):
    """Obtém artigos e tags através da API GraphQL do CMS."""

    def __init__(
        self,
        api_url: str,
        host: str,
        *,
        api_key: str | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Configura o endpoint, a publicação e o cliente HTTP interno.

        Parameters
        ----------
        api_url:
            Endpoint GraphQL do CMS.
        host:
            Host da publicação cujos artigos serão consultados.
        api_key:
            Token opcional enviado no cabeçalho ``Authorization``.
        client:
            Instância de :class:`httpx.Client` reutilizável. Quando omitida, o
            cliente cria e gerencia uma instância própria.
        timeout:
            Tempo máximo de espera quando o cliente interno é criado.
        """

        self._api_url = api_url
        """Endpoint GraphQL que recebe as consultas."""

        self._host = host
        """Host da publicação consultada."""

        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = api_key
        self._headers = headers
        """Cabeçalhos enviados em todas as consultas."""

        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        """Cliente HTTP usado para efetuar as consultas."""

        self._owns_client: bool = client is None
        """Indica se o cliente HTTP é gerenciado internamente."""

        self._log = logger or logging.getLogger("vitrine.hashnode")

    def get_articles(self, article_filter: ArticleFilter) -> Sequence[Article]:
        """Percorre as páginas de posts até esgotar o cursor ou atingir o limite."""

        limit = article_filter.limit
        if limit is not None and limit <= 0:
            return []
        articles: list[Article] = []
        after: Optional[str] = None
        gql_filter = (
            {"tagSlugs": list(article_filter.tag_slugs)}
            if article_filter.tag_slugs
            else None
        )
        while True:
            page_size = _PAGE_SIZE if limit is None else min(_PAGE_SIZE, limit - len(articles))
            data = self._query(
                GET_ARTICLES,
                {"host": self._host, "first": page_size, "after": after, "filter": gql_filter},
            )
            posts = _publication(data).get("posts")
            if not isinstance(posts, dict) or not isinstance(posts.get("edges"), list):
                raise UpstreamUnavailable("Invalid content API response")
            try:
                articles.extend(self._article_from_node(edge["node"]) for edge in posts["edges"])
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                raise UpstreamUnavailable("Invalid content API response") from exc
            page_info = posts.get("pageInfo") or {}
            after = page_info.get("endCursor")
            if not page_info.get("hasNextPage") or not after:
                break
            if limit is not None and len(articles) >= limit:
                break
        self._log.debug("%d artigos obtidos do CMS (host=%s)", len(articles), self._host)
        return articles if limit is None else articles[:limit]

    def get_article_tags(self, slug: str) -> Sequence[Tag]:
        data = self._query(GET_ARTICLE_TAGS, {"host": self._host, "slug": slug})
        post = _publication(data).get("post")
        if not isinstance(post, dict):
            return []
        return self._tags_from_payload(post.get("tags"))

    def get_articles_by_category(self, slug: str, limit: int) -> Sequence[Article]:
        return self.get_articles(ArticleFilter(limit=limit, tag_slugs=(slug,)))

    def close(self) -> None:
        """Fecha o cliente HTTP quando a instância é de responsabilidade local."""

        if self._owns_client:
            self._client.close()

    def _query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Executa a consulta e converte falhas de transporte ou GraphQL."""

        try:
            response = self._client.post(
                self._api_url,
                json={"query": query, "variables": variables},
                headers=self._headers,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            self._log.error("CMS respondeu com status %s", exc.response.status_code)
            raise UpstreamUnavailable(
                f"Content API responded with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log.error("Falha de comunicação com o CMS: %s", exc)
            raise UpstreamUnavailable("Content API is unreachable") from exc
        except ValueError as exc:
            raise UpstreamUnavailable("Invalid content API response") from exc

        if not isinstance(payload, dict):
            raise UpstreamUnavailable("Invalid content API response")
        errors = payload.get("errors")
        if errors:
            message = ", ".join(str(error.get("message")) for error in errors)
            self._log.error("Erro GraphQL retornado pelo CMS: %s", message)
            raise UpstreamUnavailable(f"GraphQL Error: {message}")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise UpstreamUnavailable("Invalid content API response")
        return data

    @staticmethod
    def _tags_from_payload(payload: Any) -> list[Tag]:
        tags: list[Tag] = []
        for item in payload or ():
            try:
                tags.append(Tag.from_mapping(item))
            except ValueError:
                continue
        return tags

    @classmethod
    def _article_from_node(cls, node: dict[str, Any]) -> Article:
        """Normaliza um nó de post do GraphQL em ``Article``."""

        markdown = (node.get("content") or {}).get("markdown") or ""
        author_payload = node.get("author")
        author = (
            Author(name=author_payload["name"], image=author_payload.get("profilePicture"))
            if author_payload
            else None
        )
        return Article(
            id=str(node["id"]),
            slug=node["slug"],
            title=node["title"],
            brief=node.get("brief") or "",
            cover_image=(node.get("coverImage") or {}).get("url") or "",
            published_at=parse_timestamp(node["publishedAt"]),
            tags=tuple(cls._tags_from_payload(node.get("tags"))),
            views=int(node.get("views") or 0),
            likes=int(node.get("reactionCount") or 0),
            content=markdown,
            author=author,
            reading_time=int(node.get("readTimeInMinutes") or estimate_reading_time(markdown)),
        )


def _publication(data: dict[str, Any]) -> dict[str, Any]:
    publication = data.get("publication")
    return publication if isinstance(publication, dict) else {}


__all__ = ["GET_ARTICLES", "GET_ARTICLE_TAGS", "HashnodeContentClient"]
