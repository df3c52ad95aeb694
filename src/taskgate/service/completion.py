# SPDX-License-Identifier: MIT

import logging
from typing import Iterator

from taskgate.model.entity_id import EntityId
from taskgate.model.requirement import Requirement
from taskgate.repository.dependency import DEPENDENCY_REPO
from taskgate.repository.task import TASK_REPO
from taskgate.service.requirement import requirement_is_complete

logger = logging.getLogger(__name__)


class _CompletionPass:
    """
    A single evaluation over the task graph.

    Eligibility is remembered per task for the lifetime of the pass only, so
    a pass must not outlive a mutation of any task or dependency edge.

    Evaluation order matches the recursive definition: a task's requirements
    are checked first, then its dependencies in insertion order, and the first
    failure decides. Every task found ineligible along the way has its checked
    flag cleared. A dependency that is already on the current path closes a
    cycle and counts as incomplete, which makes every task on that cycle
    ineligible.
    """

    def __init__(self) -> None:
        self.__eligible: dict[EntityId, bool] = {}

    def is_complete(self, task_id: EntityId) -> bool:
        return self.can_check_complete(task_id) and self.__is_checked(task_id)

    def can_check_complete(self, task_id: EntityId) -> bool:
        if task_id in self.__eligible:
            return self.__eligible[task_id]

        if not self.__requirements_complete(task_id):
            return self.__resolve(task_id, False)

        visiting: set[EntityId] = {task_id}
        frames: list[tuple[EntityId, Iterator[EntityId]]] = [
            (task_id, iter(DEPENDENCY_REPO.get_dependency_ids(task_id)))
        ]
        eligible = True
        last_complete = True

        while frames:
            current_id, pending = frames[-1]

            dependency_id = next(pending, None) if last_complete else None
            if dependency_id is None:
                frames.pop()
                visiting.discard(current_id)
                eligible = self.__resolve(current_id, last_complete)
                last_complete = eligible and self.__is_checked(current_id)
                continue

            if dependency_id in self.__eligible:
                last_complete = self.__eligible[dependency_id]
                last_complete = last_complete and self.__is_checked(dependency_id)
            elif dependency_id in visiting:
                logger.debug(
                    "Dependency cycle: task %s is reached again through %s",
                    dependency_id,
                    current_id,
                )
                last_complete = False
            elif not self.__requirements_complete(dependency_id):
                last_complete = self.__resolve(dependency_id, False)
            else:
                visiting.add(dependency_id)
                dependency_ids = DEPENDENCY_REPO.get_dependency_ids(dependency_id)
                frames.append((dependency_id, iter(dependency_ids)))
                last_complete = True

        return eligible

    def __requirements_complete(self, task_id: EntityId) -> bool:
        return all(
            requirement_is_complete(requirement)
            for requirement in TASK_REPO.tasks[task_id]["requirements"]
        )

    def __is_checked(self, task_id: EntityId) -> bool:
        return TASK_REPO.tasks[task_id]["checked_complete"]

    def __resolve(self, task_id: EntityId, eligible: bool) -> bool:
        self.__eligible[task_id] = eligible
        if not eligible and self.__is_checked(task_id):
            logger.debug("Task %s is no longer eligible, unchecking it", task_id)
            TASK_REPO.set_checked_complete(task_id, False)
        return eligible


def can_check_complete(task_id: EntityId) -> bool:
    """
    Whether the task may be checked complete right now: every requirement is
    complete and every dependency is complete, transitively.

    An ineligible task is unchecked as a side effect. An eligible task keeps
    whatever checked state it already had.
    """
    return _CompletionPass().can_check_complete(task_id)


def is_complete(task_id: EntityId) -> bool:
    return _CompletionPass().is_complete(task_id)


def is_checked_complete(task_id: EntityId) -> bool:
    return is_complete(task_id)


def dependencies_complete(task_id: EntityId) -> bool:
    completion_pass = _CompletionPass()
    return all(
        completion_pass.is_complete(dependency_id)
        for dependency_id in DEPENDENCY_REPO.get_dependency_ids(task_id)
    )


def has_dependencies(task_id: EntityId) -> bool:
    return DEPENDENCY_REPO.has_dependencies(task_id)


def toggle_complete(task_id: EntityId) -> bool:
    """
    Uncheck a complete task, or check an incomplete one if it is eligible.

    Returns whether the checked flag changed.
    """
    completion_pass = _CompletionPass()
    if completion_pass.is_complete(task_id):
        TASK_REPO.set_checked_complete(task_id, False)
        return True
    if completion_pass.can_check_complete(task_id):
        TASK_REPO.set_checked_complete(task_id, True)
        return True
    logger.debug("Task %s cannot be checked complete yet", task_id)
    return False


def set_complete(task_id: EntityId, checked_complete: bool) -> None:
    # Bypasses eligibility
    TASK_REPO.set_checked_complete(task_id, checked_complete)


def add_requirement(task_id: EntityId, requirement: Requirement) -> EntityId:
    """
    Give the task its own copy of the requirement and re-check it.

    Returns the id of the stored copy, which differs from the given one when
    that id is already owned by a task.
    """
    requirement_id = TASK_REPO.add_requirement(task_id, requirement)
    can_check_complete(task_id)
    return requirement_id


def replace_requirements(
    task_id: EntityId, requirements: list[Requirement]
) -> list[EntityId]:
    requirement_ids = TASK_REPO.replace_requirements(task_id, requirements)
    can_check_complete(task_id)
    return requirement_ids


def remove_requirement(task_id: EntityId, requirement_id: EntityId) -> bool:
    # Removal can only make a task more eligible, so nothing is re-checked
    return TASK_REPO.remove_requirement(task_id, requirement_id)


def contains_requirement(task_id: EntityId, requirement_id: EntityId) -> bool:
    return any(
        requirement["id"] == requirement_id
        for requirement in TASK_REPO.tasks[task_id]["requirements"]
    )


def add_dependency(task_id: EntityId, dependency_id: EntityId) -> None:
    __ensure_tasks_exist(task_id, [dependency_id])
    DEPENDENCY_REPO.add_dependency(task_id, dependency_id)
    TASK_REPO.touch(task_id)
    can_check_complete(task_id)


def replace_dependencies(task_id: EntityId, dependency_ids: list[EntityId]) -> None:
    __ensure_tasks_exist(task_id, dependency_ids)
    DEPENDENCY_REPO.replace_dependencies(task_id, dependency_ids)
    TASK_REPO.touch(task_id)
    can_check_complete(task_id)


def remove_dependency(task_id: EntityId, dependency_id: EntityId) -> bool:
    if not DEPENDENCY_REPO.remove_dependency(task_id, dependency_id):
        return False
    TASK_REPO.touch(task_id)
    return True


def contains_dependency(task_id: EntityId, dependency_id: EntityId) -> bool:
    return DEPENDENCY_REPO.contains_dependency(task_id, dependency_id)


def __ensure_tasks_exist(task_id: EntityId, dependency_ids: list[EntityId]) -> None:
    for checked_id in [task_id, *dependency_ids]:
        if not TASK_REPO.task_exists(checked_id):
            raise KeyError(f"Unknown task: {checked_id}")
