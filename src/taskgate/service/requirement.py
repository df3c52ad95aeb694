# SPDX-License-Identifier: MIT

from typing import Optional

from taskgate.model.entity_id import EntityId
from taskgate.model.requirement import Requirement
from taskgate.repository.task import TASK_REPO
from taskgate.template.requirement import get_requirement_template
from taskgate.time import now_utc


def create_requirement(name: str, details: Optional[str] = None) -> Requirement:
    return get_requirement_template(name, details)


def requirement_is_complete(requirement: Requirement) -> bool:
    return requirement["completed"] is not None


def complete_requirement(task_id: EntityId, requirement_id: EntityId) -> bool:
    return TASK_REPO.modify_requirement(task_id, requirement_id, completed=now_utc())


def uncomplete_requirement(task_id: EntityId, requirement_id: EntityId) -> bool:
    return TASK_REPO.modify_requirement(
        task_id, requirement_id, remove_completed=True
    )


def get_requirements(task_id: EntityId) -> list[Requirement]:
    return TASK_REPO.get_task(task_id)["requirements"]
