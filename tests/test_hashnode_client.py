from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from vitrine.domain import ArticleFilter
from vitrine.domain.errors import UpstreamUnavailable
from vitrine.infrastructure.hashnode_client import HashnodeContentClient

API_URL = "https://gql.example.com"


def _node(index: int, **overrides) -> dict:
    node = {
        "id": f"post-{index}",
        "title": f"Post {index}",
        "brief": "Resumo",
        "slug": f"post-{index}",
        "publishedAt": "2024-05-01T10:00:00.000Z",
        "views": 10 * index,
        "reactionCount": index,
        "readTimeInMinutes": 4,
        "content": {"markdown": "# Hello"},
        "coverImage": {"url": f"https://cdn.example.com/{index}.png"},
        "tags": [{"id": "t1", "name": "Python", "slug": "python", "logo": None}],
        "author": {"name": "Ana", "profilePicture": "https://cdn.example.com/ana.png"},
    }
    node.update(overrides)
    return node


def _page(nodes: list[dict], *, cursor: str | None = None) -> dict:
    return {
        "data": {
            "publication": {
                "posts": {
                    "edges": [{"node": node} for node in nodes],
                    "pageInfo": {"hasNextPage": cursor is not None, "endCursor": cursor},
                }
            }
        }
    }


def _client(handler, **kwargs) -> HashnodeContentClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return HashnodeContentClient(API_URL, "blog.example.com", client=http_client, **kwargs)


def test_get_articles_follows_pagination() -> None:
    requests: list[dict] = []
    pages = {None: _page([_node(1), _node(2)], cursor="c1"), "c1": _page([_node(3)])}

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests.append(body["variables"])
        return httpx.Response(200, json=pages[body["variables"]["after"]])

    articles = _client(handler).get_articles(ArticleFilter())

    assert [article.slug for article in articles] == ["post-1", "post-2", "post-3"]
    assert [variables["after"] for variables in requests] == [None, "c1"]
    assert requests[0]["host"] == "blog.example.com"
    assert requests[0]["first"] == 50
    assert requests[0]["filter"] is None


def test_get_articles_maps_nodes_into_articles() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_page([_node(2)]))

    article = _client(handler).get_articles(ArticleFilter())[0]

    assert article.id == "post-2"
    assert article.published_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert article.views == 20
    assert article.likes == 2
    assert article.reading_time == 4
    assert article.content == "# Hello"
    assert article.cover_image == "https://cdn.example.com/2.png"
    assert article.author is not None and article.author.name == "Ana"
    assert [tag.slug for tag in article.tags] == ["python"]


def test_get_articles_by_category_sends_tag_filter_and_limit() -> None:
    captured: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(json.loads(request.content)["variables"])
        return httpx.Response(200, json=_page([_node(1), _node(2), _node(3)], cursor="more"))

    articles = _client(handler).get_articles_by_category("python", 3)

    assert len(articles) == 3
    assert len(captured) == 1
    assert captured[0]["first"] == 3
    assert captured[0]["filter"] == {"tagSlugs": ["python"]}


def test_api_key_is_sent_as_authorization_header() -> None:
    headers: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        headers.append(request.headers.get("Authorization"))
        return httpx.Response(200, json=_page([]))

    _client(handler, api_key="secret").get_articles(ArticleFilter())

    assert headers == ["secret"]


def test_get_article_tags_returns_empty_for_missing_post() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"publication": {"post": None}}})

    assert _client(handler).get_article_tags("missing") == []


def test_get_article_tags_skips_nameless_tags() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        tags = [{"id": "1", "name": "React", "slug": "react"}, {"id": "2", "name": ""}]
        return httpx.Response(200, json={"data": {"publication": {"post": {"tags": tags}}}})

    tags = _client(handler).get_article_tags("post")

    assert [tag.slug for tag in tags] == ["react"]


@pytest.mark.parametrize(
    ("response", "message"),
    [
        (httpx.Response(503), "Content API responded with status 503"),
        (httpx.Response(200, json={"errors": [{"message": "boom"}]}), "GraphQL Error: boom"),
        (httpx.Response(200, content=b"not json"), "Invalid content API response"),
        (
            httpx.Response(200, json={"data": {"publication": {"posts": None}}}),
            "Invalid content API response",
        ),
        (
            httpx.Response(200, json=_page([{"slug": "no-id"}])),
            "Invalid content API response",
        ),
    ],
)
def test_failures_become_upstream_unavailable(response: httpx.Response, message: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    with pytest.raises(UpstreamUnavailable) as excinfo:
        _client(handler).get_articles(ArticleFilter())

    assert excinfo.value.message == message


def test_transport_error_is_reported_as_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(UpstreamUnavailable, match="Content API is unreachable"):
        _client(handler).get_articles(ArticleFilter())


def test_close_only_closes_owned_client() -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    HashnodeContentClient(API_URL, "blog.example.com", client=http_client).close()

    assert http_client.is_closed is False


def test_non_mapping_tags_are_skipped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_page([_node(1, tags=["py", {"name": "Go", "slug": "go"}])]))

    article = _client(handler).get_articles(ArticleFilter())[0]

    assert [tag.slug for tag in article.tags] == ["go"]


@pytest.mark.parametrize(
    "body",
    [
        ["unexpected", "list"],
        {"data": {"publication": ["not", "a", "mapping"]}},
        _page([_node(1, author="Ana")]),
        _page([_node(1, coverImage="https://cdn.example.com/1.png")]),
    ],
)
def test_unexpected_shapes_become_upstream_unavailable(body) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(UpstreamUnavailable, match="Invalid content API response"):
        _client(handler).get_articles(ArticleFilter())
