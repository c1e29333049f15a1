"""Shared pytest fixtures and test helpers for contentmenu tests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from contentmenu.config.models import DisplayConfig, SiteConfig
from contentmenu.config.settings import ContentMenuSettings
from contentmenu.domain.errors import ContentLookupError
from contentmenu.domain.models import ContentItem, MenuItem, Term, Thumbnail
from contentmenu.infrastructure.loader import SiteFixture, SiteLoader
from contentmenu.infrastructure.site import Site
from contentmenu.infrastructure.templates import build_template_environment
from contentmenu.plugins.manager import PluginManager
from contentmenu.plugins.builtins.autop import AutoParagraphPlugin
from contentmenu.render.context import RenderContext, TextFilters


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings resolution."""
    monkeypatch.delenv("CONTENTMENU_CONFIG", raising=False)
    monkeypatch.delenv("CONTENTMENU_DISPLAY__ARCHIVE_LIMIT", raising=False)


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Temporary site directory."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def site(site_root: Path) -> Iterator[Site]:
    """Site with an initialized, empty database."""
    settings = ContentMenuSettings.from_cli(site_root=site_root)
    s = Site(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def loaded_site(site: Site) -> Site:
    """Site populated with :data:`SAMPLE_SITE`."""
    SiteLoader(site).load_fixture(SiteFixture.model_validate(SAMPLE_SITE))
    return site


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp site root so the CLI opens an isolated site."""
    monkeypatch.chdir(site_root)


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------


class FakeContentSource:
    """Content source backed by dicts; records every call made to it."""

    def __init__(
        self,
        items: Iterable[ContentItem] = (),
        *,
        types: Iterable[str] = ("post", "page"),
        terms: Iterable[Term] = (),
        tagged: dict[int, list[int]] | None = None,
        fail: bool = False,
    ) -> None:
        self.items = {item.id: item for item in items}
        self.types = set(types)
        self.terms = {(term.id, term.taxonomy): term for term in terms}
        self.tagged = tagged or {}
        self.fail = fail
        self.calls: list[tuple[Any, ...]] = []

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.fail:
            raise ContentLookupError(f"{call[0]} failed")

    def get_by_id(self, item_id: int) -> ContentItem | None:
        self._record("get_by_id", item_id)
        return self.items.get(item_id)

    def query_by_type(self, content_type: str, limit: int) -> list[ContentItem]:
        self._record("query_by_type", content_type, limit)
        return [i for i in self.items.values() if i.content_type == content_type][:limit]

    def query_by_term(self, taxonomy: str, term_id: int, limit: int) -> list[ContentItem]:
        self._record("query_by_term", taxonomy, term_id, limit)
        return [self.items[i] for i in self.tagged.get(term_id, [])][:limit]

    def get_term(self, term_id: int, taxonomy: str) -> Term | None:
        self._record("get_term", term_id, taxonomy)
        return self.terms.get((term_id, taxonomy))

    def type_exists(self, content_type: str) -> bool:
        self._record("type_exists", content_type)
        return content_type in self.types

    def recent_published(self, content_type: str, limit: int) -> list[ContentItem]:
        self._record("recent_published", content_type, limit)
        return [i for i in self.items.values() if i.content_type == content_type][:limit]


def make_item(item_id: int, title: str | None = None, **kwargs: Any) -> ContentItem:
    """ContentItem with sensible defaults; ``thumb=(url, w, h)`` adds a thumbnail."""
    thumb = kwargs.pop("thumb", None)
    if thumb is not None:
        url, width, height = thumb
        kwargs["thumbnail"] = Thumbnail(url=url, width=width, height=height)
    kwargs.setdefault("url", f"/items/{item_id}")
    return ContentItem(id=item_id, title=title or f"Item {item_id}", **kwargs)


def make_menu_item(item_id: int, type: str = "custom_link", **kwargs: Any) -> MenuItem:
    kwargs.setdefault("title", f"Menu {item_id}")
    return MenuItem(id=item_id, type=type, **kwargs)


def make_context(
    content: FakeContentSource,
    *,
    display: DisplayConfig | None = None,
    site: SiteConfig | None = None,
    plugins: PluginManager | None = None,
) -> RenderContext:
    """RenderContext over packaged templates and the built-in autop filter."""
    if plugins is None:
        plugins = PluginManager()
        plugins.register_plugin(AutoParagraphPlugin(), name="autop")
    return RenderContext(
        content=content,
        display=display or DisplayConfig(),
        site=site or SiteConfig(),
        filters=TextFilters(plugins),
        templates=build_template_environment("blocks"),
    )


# ---------------------------------------------------------------------------
# Sample site used by repository, service, and command tests
# ---------------------------------------------------------------------------

SAMPLE_SITE: dict[str, Any] = {
    "content_types": ["post", "page", {"name": "article", "label": "Articles"}],
    "terms": [
        {"id": 7, "taxonomy": "category", "name": "News", "description": "Latest news"},
        {"id": 8, "taxonomy": "post_tag", "name": "Misc"},
    ],
    "items": [
        {
            "id": 1,
            "title": "First post",
            "body": "The first post body.",
            "published": "2024-01-01T09:00:00",
            "url": "/first",
            "terms": [7],
        },
        {
            "id": 2,
            "title": "Second post",
            "body": "The second post body.",
            "published": "2024-02-01T09:00:00",
            "url": "/second",
            "terms": [7],
            "thumbnail": {"url": "/img/second.jpg", "width": 1600, "height": 900},
        },
        {
            "id": 3,
            "title": "Draft post",
            "status": "draft",
            "published": "2024-03-01T09:00:00",
            "terms": [7],
        },
        {
            "id": 4,
            "title": "Guide",
            "type": "article",
            "published": "2024-01-15T09:00:00",
            "url": "/guide",
            "thumbnail": {"url": "/img/guide.jpg", "width": 1200, "height": 600},
        },
        {
            "id": 5,
            "title": "Notes",
            "type": "article",
            "published": "2024-01-20T09:00:00",
            "url": "/notes",
        },
        {
            "id": 10,
            "title": "About us",
            "type": "page",
            "body": "We make things.\n\nSince 2001.",
            "url": "/about-us",
        },
        {"id": 11, "title": "Landing", "type": "page", "template": "dynamic", "url": "/landing"},
        {"id": 12, "title": "Blog", "type": "page", "url": "/blog"},
    ],
    "menus": [
        {
            "id": 1,
            "name": "Front Page",
            "locations": ["front_page"],
            "items": [
                {"id": 100, "type": "custom_link", "title": "About", "url": "/about"},
                {"id": 101, "type": "type_archive", "object_ref": "article", "title": "Articles"},
                {
                    "id": 102,
                    "type": "taxonomy",
                    "object_ref": "category",
                    "object_id": 7,
                    "title": "News",
                    "children": [
                        {"id": 103, "type": "custom_link", "title": "Nested", "url": "/nested"},
                    ],
                },
                {
                    "id": 104,
                    "type": "single_item",
                    "object_ref": "page",
                    "object_id": 10,
                    "title": "About us",
                    "url": "/about-us",
                },
                {"id": 105, "type": "single_item", "object_id": 999, "title": "Gone"},
                {"id": 106, "type": "type_archive", "object_ref": "podcast", "title": "Podcasts"},
                {"id": 107, "type": "woo_product", "title": "Shop"},
            ],
        },
        {
            "id": 2,
            "name": "Landing menu",
            "locations": ["11"],
            "items": [
                {
                    "id": 200,
                    "type": "custom_link",
                    "title": "Contact",
                    "url": "/contact",
                    "description": "Write to us",
                },
            ],
        },
    ],
}
