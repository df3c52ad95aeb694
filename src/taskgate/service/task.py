# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from taskgate import time
from taskgate.model.entity_id import EntityId
from taskgate.model.note import Note
from taskgate.model.task import Task
from taskgate.model.task_type import TaskType
from taskgate.repository.configuration import CONFIGURATION_REPO
from taskgate.repository.dependency import DEPENDENCY_REPO
from taskgate.repository.task import TASK_REPO
from taskgate.template.note import get_note_template
from taskgate.template.task import get_task_template

logger = logging.getLogger(__name__)


def create_task(
    name: str,
    details: Optional[str],
    deadline: pendulum.Date,
    weighting: int,
    type: str,
) -> EntityId:
    """
    Create an unchecked task with no requirements, dependencies or notes.

    An unrecognised type label falls back to the configured default type.
    """
    task_type = TaskType.get(type)
    if task_type is None:
        default_type = CONFIGURATION_REPO.get_config()["default_task_type"]
        logger.debug(
            "Unknown task type %r for %r, using default %r", type, name, default_type
        )
        task_type = TaskType.get(default_type)

    task = get_task_template(name, details, deadline, weighting, task_type)
    id = TASK_REPO.save_new_task(task)
    logger.info("Created task %r (%s)", name, id)
    return id


def delete_task(id: EntityId) -> bool:
    """
    Destroy a task with its requirements and notes, and drop every dependency
    edge that points to or from it.
    """
    if not TASK_REPO.task_exists(id):
        return False
    removed_edges = DEPENDENCY_REPO.remove_task(id)
    TASK_REPO.delete_task(id)
    logger.info("Deleted task %s and %d dependency edge(s)", id, removed_edges)
    return True


def get_task(id: EntityId) -> Task:
    return TASK_REPO.get_task(id)


def get_all_tasks() -> list[Task]:
    return TASK_REPO.get_all_tasks()


def task_label(id: EntityId) -> str:
    return TASK_REPO.tasks[id]["name"]


def set_details(id: EntityId, details: Optional[str]) -> None:
    TASK_REPO.modify_task(id, details=details, remove_details=details is None)


def set_deadline(id: EntityId, date: pendulum.Date) -> None:
    TASK_REPO.modify_task(
        id, deadline_timestamp=time.date_to_deadline_timestamp(date)
    )


def get_deadline(id: EntityId) -> str:
    display_format = CONFIGURATION_REPO.get_config()["deadline_display_format"]
    return time.deadline_timestamp_to_display_str(
        TASK_REPO.tasks[id]["deadline"]["timestamp"], display_format
    )


def get_deadline_date(id: EntityId) -> pendulum.DateTime:
    return time.deadline_timestamp_to_datetime(
        TASK_REPO.tasks[id]["deadline"]["timestamp"]
    )


def set_weighting(id: EntityId, weighting: int) -> None:
    TASK_REPO.modify_task(id, weighting=weighting)


def get_weighting(id: EntityId) -> int:
    return TASK_REPO.tasks[id]["weighting"]


def set_type(id: EntityId, type: str) -> bool:
    """
    Apply a type label if it names a known type.

    Returns False and leaves the task untouched otherwise.
    """
    task_type = TaskType.get(type)
    if task_type is None:
        logger.debug("Ignoring unknown task type %r for task %s", type, id)
        return False
    TASK_REPO.modify_task(id, type=task_type)
    return True


def get_type(id: EntityId) -> Optional[TaskType]:
    return TASK_REPO.tasks[id]["type"]


def get_dependencies(id: EntityId) -> list[Task]:
    return [
        TASK_REPO.get_task(dependency_id)
        for dependency_id in DEPENDENCY_REPO.get_dependency_ids(id)
    ]


def get_dependents(id: EntityId) -> list[Task]:
    return [
        TASK_REPO.get_task(dependent_id)
        for dependent_id in DEPENDENCY_REPO.get_dependent_ids(id)
    ]


def add_note(id: EntityId, text: str) -> EntityId:
    note = get_note_template(text)
    TASK_REPO.add_note(id, note)
    return note["id"]


def remove_note(id: EntityId, note_id: EntityId) -> bool:
    return TASK_REPO.remove_note(id, note_id)


def get_notes(id: EntityId) -> list[Note]:
    return TASK_REPO.get_task(id)["notes"]
