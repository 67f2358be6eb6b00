from __future__ import annotations

from typing import List

import pytest

from launcher import launcher as dispatcher
from launcher.config_store import ConfigLocation


class FakePopen:
    calls: List[object] = []

    def __init__(self, args, *unused, **kwargs):
        FakePopen.calls.append(args)
        self.args = args
        self.returncode = None


@pytest.fixture
def location(tmp_path) -> ConfigLocation:
    loc = ConfigLocation(tmp_path / "Launcher")
    loc.ensure()
    return loc


@pytest.fixture
def popen_calls(monkeypatch) -> List[object]:
    FakePopen.calls = []
    monkeypatch.setattr(dispatcher.subprocess, "Popen", FakePopen)
    return FakePopen.calls


@pytest.fixture
def on_windows(monkeypatch) -> None:
    monkeypatch.setattr(dispatcher, "_platform", lambda: "windows")


@pytest.fixture
def on_linux(monkeypatch) -> None:
    monkeypatch.setattr(dispatcher, "_platform", lambda: "linux")


@pytest.fixture
def write_config(location):
    def write(*lines: str) -> None:
        location.path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return write
