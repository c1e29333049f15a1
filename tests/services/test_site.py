"""Tests for SiteService — init, fixture loading, and locations."""

from __future__ import annotations

import json
from pathlib import Path

from contentmenu.infrastructure.site import Site
from contentmenu.services.site import SiteService
from tests.conftest import SAMPLE_SITE


def _write_sample(tmp_path: Path) -> Path:
    path = tmp_path / "sample.yaml"
    path.write_text(json.dumps(SAMPLE_SITE))
    return path


class TestInit:
    def test_reports_paths(self, site: Site, site_root: Path) -> None:
        result = SiteService(site).init()
        assert result.ok
        assert result.data["site_root"] == str(site_root)
        assert result.data["database"] == str(site_root / ".contentmenu" / "site.db")
        assert result.data["plugins_dir"].endswith("plugins")


class TestLoad:
    def test_load(self, site: Site, tmp_path: Path) -> None:
        path = _write_sample(tmp_path)
        result = SiteService(site).load(path)
        assert result.ok
        assert result.data["path"] == str(path)
        assert result.data["items"] == 8
        assert result.data["menu_items"] == 9

    def test_invalid_fixture(self, site: Site, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("menus:\n  - name: Missing id\n")
        result = SiteService(site).load(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FIXTURE"

    def test_duplicate_load_fails(self, site: Site, tmp_path: Path) -> None:
        path = _write_sample(tmp_path)
        service = SiteService(site)
        assert service.load(path).ok
        result = service.load(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "LOAD_FAILED"
        assert "UNIQUE" in result.error.message

    def test_failed_load_is_atomic(self, site: Site, tmp_path: Path) -> None:
        broken = dict(SAMPLE_SITE)
        broken["menus"] = [*SAMPLE_SITE["menus"], SAMPLE_SITE["menus"][0]]
        path = tmp_path / "broken.yaml"
        path.write_text(json.dumps(broken))
        assert not SiteService(site).load(path).ok
        assert site.content.get_by_id(10) is None


class TestLocations:
    def test_empty_site(self, site: Site) -> None:
        result = SiteService(site).locations()
        assert result.data["items"] == [
            {"location": "front_page_content", "label": "Front Page Content", "menu": None}
        ]

    def test_loaded_site(self, loaded_site: Site) -> None:
        result = SiteService(loaded_site).locations()
        assert result.ok
        assert result.data["count"] == 2
        assert result.data["items"][1] == {
            "location": "11_content",
            "label": "Landing Content",
            "menu": "Landing menu",
        }
        assert result.warnings == []

    def test_unregistered_assignment_warns(self, loaded_site: Site) -> None:
        loaded_site.menus.assign("12_content", 2)
        result = SiteService(loaded_site).locations()
        assert result.warnings == [
            "Menu 'Landing menu' is assigned to unregistered location '12_content'"
        ]
