# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Iterator, Optional, TypeAlias

import pendulum
import pytest

from taskgate import configuration
from taskgate.model.entity_id import EntityId
from taskgate.model.requirement import Requirement
from taskgate.repository import task as task_repository
from taskgate.repository.configuration import CONFIGURATION_REPO
from taskgate.repository.dependency import DEPENDENCY_REPO
from taskgate.repository.task import TASK_REPO
from taskgate.service.requirement import create_requirement
from taskgate.service.task import create_task
from taskgate.template import task as task_template
from taskgate.time import now_utc

TaskFactory: TypeAlias = Callable[..., EntityId]
RequirementFactory: TypeAlias = Callable[..., Requirement]


@pytest.fixture(autouse=True)
def isolated_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Fresh repositories for every test, with configuration read from a
    temporary directory instead of the user's config dir.
    """
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "log")
    TASK_REPO.clear()
    DEPENDENCY_REPO.clear()
    CONFIGURATION_REPO.clear()
    yield
    TASK_REPO.clear()
    DEPENDENCY_REPO.clear()
    CONFIGURATION_REPO.clear()


class Clock:
    """Stands in for now_utc, moving one second forward on every reading."""

    def __init__(self) -> None:
        self.current = pendulum.datetime(2026, 10, 19, 9, 0, 0, tz="UTC")

    def __call__(self) -> pendulum.DateTime:
        self.current = self.current.add(seconds=1)
        return self.current


@pytest.fixture()
def clock(monkeypatch: pytest.MonkeyPatch) -> Clock:
    fake_clock = Clock()
    monkeypatch.setattr(task_repository, "now_utc", fake_clock)
    monkeypatch.setattr(task_template, "now_utc", fake_clock)
    return fake_clock


@pytest.fixture()
def make_task() -> TaskFactory:
    def factory(
        name: str = "task",
        details: Optional[str] = None,
        deadline: Optional[pendulum.Date] = None,
        weighting: int = 1,
        type: str = "other",
    ) -> EntityId:
        return create_task(
            name,
            details,
            deadline if deadline is not None else pendulum.date(2026, 10, 19),
            weighting,
            type,
        )

    return factory


@pytest.fixture()
def make_requirement() -> RequirementFactory:
    def factory(name: str = "requirement", complete: bool = False) -> Requirement:
        requirement = create_requirement(name)
        if complete:
            requirement["completed"] = now_utc()
        return requirement

    return factory
