"""Pytest configuration and fixtures for rp tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from rp.paths import PLAYGROUND_DIRNAME


@pytest.fixture
def playground(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir and return the playground root (not created)."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home / PLAYGROUND_DIRNAME


class FakeRunner:
    """Stand-in for subprocess.run that records argv and fakes cargo new."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self.returncodes: dict[str, int] = {}
        self.missing: set[str] = set()

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        self.kwargs.append(kwargs)
        tool = argv[0]
        if tool in self.missing:
            raise FileNotFoundError(2, "No such file or directory", tool)
        code = self.returncodes.get(tool, 0)
        if tool == "cargo" and code == 0:
            project = Path(argv[2])
            (project / "src").mkdir(parents=True)
            (project / "src" / "main.rs").write_text('fn main() {}\n', encoding="utf-8")
        stdout = "" if kwargs.get("capture_output") else None
        return subprocess.CompletedProcess(argv, code, stdout=stdout, stderr=stdout)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr("rp.exec.subprocess.run", runner)
    monkeypatch.setattr("rp.scaffold.shutil.which", lambda tool: f"/usr/bin/{tool}")
    return runner


@pytest.fixture
def make_projects():
    """Return a helper that creates project directories under a category dir."""

    def _make(directory: Path, *names: str) -> None:
        for name in names:
            (directory / name).mkdir(parents=True)

    return _make
