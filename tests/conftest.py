import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from error_bag import ErrorBag


class User:
    def __init__(self, name: str, sex: int) -> None:
        self.name = name
        self.sex = sex

    def __repr__(self) -> str:
        return f"User(name={self.name!r}, sex={self.sex})"


@pytest.fixture
def user() -> User:
    return User(name="Hello", sex=1)


@pytest.fixture
def populated_bag(user: User) -> ErrorBag:
    """Bag with two codes, three messages on the first and data on the first."""
    bag = ErrorBag(200, "OK")
    bag.add(200, "OK2")
    bag.add(200, "OK3")
    bag.add(300, "SS3")
    bag.add_data(user)
    return bag


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route the package's loguru records into ``caplog``."""
    caplog.set_level(logging.NOTSET)
    logger.enable("error_bag")
    sink_id = logger.add(caplog.handler, level="TRACE", format="{message}")
    yield caplog
    logger.remove(sink_id)
    logger.disable("error_bag")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep Settings away from the caller's environment and ``.env``."""
    monkeypatch.delenv("ERROR_BAG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ERROR_BAG_TRACE", raising=False)
    monkeypatch.chdir(str(tmp_path))
