"""Unit tests for run configuration."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from rich.console import Console

from mkgo.core.changelog import CHANGELOG, Change, print_changelog
from mkgo.core.config import DATE_FORMAT, DEFAULT_VERSION, ScaffoldConfig, today


class TestScaffoldConfig:
    def test_from_env_fills_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOPATH", "/home/u/go")
        monkeypatch.setenv("USER", "u")

        config = ScaffoldConfig.from_env("example.com/acme/tool")

        assert config.gopath == "/home/u/go"
        assert config.user == "u"
        assert config.version == DEFAULT_VERSION
        assert config.date == today()
        assert config.year == str(date.today().year)
        assert not config.overwrite
        assert not config.readme
        assert config.license == ""

    def test_explicit_values_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USER", "u")

        config = ScaffoldConfig.from_env("x", date="2020 Oct 10", user="Ada", version="1.2.3")

        assert config.date == "2020 Oct 10"
        assert config.user == "Ada"
        assert config.version == "1.2.3"

    def test_missing_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GOPATH", raising=False)
        monkeypatch.delenv("USER", raising=False)

        config = ScaffoldConfig.from_env("x")
        assert config.gopath == ""
        assert config.user == ""

    def test_accepts_empty_date_and_version(self) -> None:
        config = ScaffoldConfig.from_env("x", date="", version="")
        assert config.date == ""
        assert config.version == ""

    def test_frozen(self) -> None:
        config = ScaffoldConfig(identifier="x", date="d")
        with pytest.raises(AttributeError):
            config.identifier = "y"  # type: ignore[misc]

    def test_today_format(self) -> None:
        parsed = datetime.strptime(today(), DATE_FORMAT)
        assert parsed.date() == date.today()


class TestChangelog:
    def test_versions_ascend(self) -> None:
        versions = [tuple(int(p) for p in c.version.split(".")) for c in CHANGELOG]
        assert versions == sorted(versions)

    def test_print(self) -> None:
        console = Console(record=True, width=120)
        print_changelog(console, (Change("pkg", "9.9.9", "2020 Oct 10", ("did [things]",)),))

        text = console.export_text()
        assert "pkg 9.9.9 (2020 Oct 10)" in text
        assert "- did [things]" in text
