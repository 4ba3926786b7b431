"""Shared fixtures for the mkgo test suite."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import os
from pathlib import Path
import sys

import pytest

from mkgo.core.config import ScaffoldConfig
from mkgo.core.tools import ToolResult


@dataclass
class RecordingRunner:
    """Fake tool runner that records every call and fails the commands it is told to."""

    failures: dict[str, str] = field(default_factory=dict)
    calls: list[tuple[Path, tuple[str, ...]]] = field(default_factory=list)

    def __call__(self, cwd: Path, command: str, *args: str) -> ToolResult:
        argv = (command, *args)
        self.calls.append((cwd, argv))
        if command in self.failures:
            return ToolResult(argv, 1, self.failures[command])
        return ToolResult(argv, 0, "")


@pytest.fixture
def runner_fake() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def gopath(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fresh GOPATH with a second, unused entry to exercise list splitting."""
    root = tmp_path / "go"
    monkeypatch.setenv("GOPATH", os.pathsep.join([str(root), str(tmp_path / "other")]))
    monkeypatch.setenv("USER", "gopher")
    return root


@pytest.fixture
def make_config(gopath: Path) -> Callable[..., ScaffoldConfig]:
    def _make(identifier: str = "example.com/acme/tool", **overrides: object) -> ScaffoldConfig:
        values: dict[str, object] = {
            "identifier": identifier,
            "date": "2020 Oct 10",
            "version": "0.1.0",
            "user": "gopher",
            "year": "2020",
            "gopath": os.environ["GOPATH"],
        }
        values.update(overrides)
        return ScaffoldConfig(**values)  # type: ignore[arg-type]

    return _make


@dataclass
class FakeTools:
    """Stand-in ``goimports`` and ``go`` executables on PATH that log their argv."""

    bin_dir: Path
    log: Path

    def install(self, name: str, exit_code: int = 0, output: str = "") -> None:
        script = self.bin_dir / name
        script.write_text(
            "#!/bin/sh\n"
            f'echo "{name} $*" >> "{self.log}"\n'
            f"printf '%s' '{output}'\n"
            f"exit {exit_code}\n"
        )
        script.chmod(0o755)

    def calls(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text().splitlines()


@pytest.fixture
def fake_tools(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, gopath: Path) -> FakeTools:
    """Fake tools on PATH, run inside the temporary GOPATH."""
    if sys.platform == "win32":
        pytest.skip("fake tools are POSIX shell scripts")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tools = FakeTools(bin_dir, tmp_path / "tools.log")
    tools.install("goimports")
    tools.install("go")
    monkeypatch.setenv("PATH", os.pathsep.join([str(bin_dir), os.environ.get("PATH", "")]))
    return tools
