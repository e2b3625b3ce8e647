"""Shared test fixtures."""

import pytest

from preflight.models import CommandResult


class FakeRunner:
    """CommandRunner returning scripted results keyed by program name."""

    def __init__(self, results=None, default=None):
        self.results = results or {}
        self.default = default or CommandResult(exit_code=127, stderr="not found")
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        return self.results.get(args[0], self.default)


@pytest.fixture
def fake_runner():
    """Runner where nothing is installed until results are scripted."""
    return FakeRunner()


@pytest.fixture
def tmp_home(tmp_path, monkeypatch):
    """Point HOME at a temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain output unless a test opts back in."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("PREFLIGHT_CONFIG", raising=False)
    monkeypatch.delenv("PREFLIGHT_COMMANDS", raising=False)
