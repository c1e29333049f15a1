"""Tests for ContentMenuSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from contentmenu.config.settings import ContentMenuSettings


class TestSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ContentMenuSettings.from_cli(site_root=tmp_path)
        assert settings.site_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.site.name == "my-site"
        assert settings.display.archive_limit == 3

    def test_data_dir(self, tmp_path: Path) -> None:
        settings = ContentMenuSettings.from_cli(site_root=tmp_path)
        assert settings.data_dir == tmp_path / ".contentmenu"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ContentMenuSettings.from_cli(site_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "contentmenu.toml").write_text(
            '[site]\nname = "blog"\nposts_page_id = 12\n[display]\narchive_limit = 6\n'
        )
        settings = ContentMenuSettings.from_cli(site_root=tmp_path)
        assert settings.site.name == "blog"
        assert settings.site.posts_page_id == 12
        assert settings.display.archive_limit == 6
        assert settings.display.excerpt_length == 55  # default preserved

    def test_zero_limit_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "contentmenu.toml").write_text("[display]\narchive_limit = 0\n")
        settings = ContentMenuSettings.from_cli(site_root=tmp_path)
        assert settings.display.archive_limit == 3

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[site]\nname = "custom"\n')
        settings = ContentMenuSettings.from_cli(config_path=str(custom), site_root=tmp_path)
        assert settings.site.name == "custom"
        assert settings.config_path == custom

    def test_site_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "contentmenu.toml").write_text("")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = ContentMenuSettings.from_cli()
        assert settings.site_root.resolve() == tmp_path.resolve()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "contentmenu.toml").write_text("[display\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ContentMenuSettings.from_cli(site_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "contentmenu.toml").write_text("[display]\narchive_limit = 6\n")
        monkeypatch.setenv("CONTENTMENU_DISPLAY__ARCHIVE_LIMIT", "8")
        settings = ContentMenuSettings.from_cli(site_root=tmp_path)
        assert settings.display.archive_limit == 8

    def test_cli_flags_win(self, tmp_path: Path) -> None:
        settings = ContentMenuSettings.from_cli(site_root=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True
