from pathlib import Path
from typing import Any, Optional

import pytest
from changecast.observer import Observable


class RecordingWatcher:
    def __init__(
        self,
        name: str = "watcher",
        calls: Optional[list[tuple[str, tuple[Any, ...]]]] = None,
    ) -> None:
        self.name = name
        self.calls = calls if calls is not None else []
        self.notifications: list[tuple[Any, ...]] = []

    def update(self, *args: Any) -> None:
        self.notifications.append(args)
        self.calls.append((self.name, args))

    def my_update(self, *args: Any) -> None:
        self.calls.append((f"{self.name}.my_update", args))


@pytest.fixture(autouse=True)
def tmp_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def observable() -> Observable:
    return Observable()


@pytest.fixture
def watchers() -> dict[str, RecordingWatcher]:
    return {}


@pytest.fixture
def watcher() -> RecordingWatcher:
    return RecordingWatcher()


@pytest.fixture
def make_watcher() -> type[RecordingWatcher]:
    return RecordingWatcher


@pytest.fixture
def config_file(tmp_config_home: Path) -> Path:
    config_file_path = tmp_config_home / "changecast" / "changecast.toml"
    config_file_path.parent.mkdir(parents=True)
    return config_file_path
