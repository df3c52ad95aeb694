# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from taskgate.model.entity_id import EntityId, generate_entity_id
from taskgate.model.note import Note
from taskgate.model.requirement import Requirement
from taskgate.model.task import Task
from taskgate.model.task_type import TaskType
from taskgate.time import now_utc


class TaskRepository:
    """
    In-memory arena of task records keyed by their entity id.

    Each record owns its requirements and notes; they are created and
    destroyed with it. Dependencies between tasks live in the dependency
    repository, never inside a record.
    """

    def __init__(self) -> None:
        self._tasks: dict[EntityId, Task] = {}

    @property
    def tasks(self) -> dict[EntityId, Task]:
        return self._tasks

    def clear(self) -> None:
        self._tasks = {}

    def save_new_task(self, task: Task) -> EntityId:
        task["id"] = generate_entity_id()
        self.tasks[task["id"]] = task
        return task["id"]

    def delete_task(self, id: EntityId) -> bool:
        return self.tasks.pop(id, None) is not None

    def task_exists(self, id: EntityId) -> bool:
        return id in self.tasks

    def modify_task(
        self,
        id: EntityId,
        name: Optional[str] = None,
        details: Optional[str] = None,
        deadline_timestamp: Optional[str] = None,
        weighting: Optional[int] = None,
        type: Optional[TaskType] = None,
        remove_details: bool = False,
    ) -> None:
        task = self.tasks[id]
        task["updated"] = now_utc()
        if name is not None:
            task["name"] = name
        if details is not None:
            task["details"] = details
        if deadline_timestamp is not None:
            # Replace the wrapped value, the wrapper itself stays
            task["deadline"]["timestamp"] = deadline_timestamp
        if weighting is not None:
            task["weighting"] = weighting
        if type is not None:
            task["type"] = type

        if remove_details:
            task["details"] = None

    def set_checked_complete(self, id: EntityId, checked_complete: bool) -> None:
        task = self.tasks[id]
        if task["checked_complete"] != checked_complete:
            task["checked_complete"] = checked_complete
            task["updated"] = now_utc()

    def touch(self, id: EntityId) -> None:
        self.tasks[id]["updated"] = now_utc()

    def add_requirement(self, id: EntityId, requirement: Requirement) -> EntityId:
        """
        Store a copy of the requirement on the task.

        The copy gets a fresh id when its id is already owned by any task.
        Returns the id the stored requirement ends up with.
        """
        task = self.tasks[id]
        owned = self.__owned_copy(requirement, self.__requirement_ids())
        task["updated"] = now_utc()
        task["requirements"].append(owned)
        return owned["id"]

    def replace_requirements(
        self, id: EntityId, requirements: list[Requirement]
    ) -> list[EntityId]:
        task = self.tasks[id]
        # The task's current requirements are discarded, so their ids are free
        taken = self.__requirement_ids(exclude_task_id=id)
        owned = [
            self.__owned_copy(requirement, taken) for requirement in requirements
        ]
        task["updated"] = now_utc()
        task["requirements"] = owned
        return [requirement["id"] for requirement in owned]

    def remove_requirement(self, id: EntityId, requirement_id: EntityId) -> bool:
        task = self.tasks[id]
        for index, requirement in enumerate(task["requirements"]):
            if requirement["id"] == requirement_id:
                del task["requirements"][index]
                task["updated"] = now_utc()
                return True
        return False

    def modify_requirement(
        self,
        id: EntityId,
        requirement_id: EntityId,
        completed: Optional[pendulum.DateTime] = None,
        remove_completed: bool = False,
    ) -> bool:
        task = self.tasks[id]
        matches = [r for r in task["requirements"] if r["id"] == requirement_id]
        if len(matches) == 0:
            return False

        requirement = matches[0]
        requirement["updated"] = now_utc()
        task["updated"] = requirement["updated"]
        if completed is not None:
            requirement["completed"] = completed

        if remove_completed:
            requirement["completed"] = None
        return True

    def add_note(self, id: EntityId, note: Note) -> None:
        task = self.tasks[id]
        task["updated"] = now_utc()
        task["notes"].append(note)

    def remove_note(self, id: EntityId, note_id: EntityId) -> bool:
        task = self.tasks[id]
        remaining = [note for note in task["notes"] if note["id"] != note_id]
        if len(remaining) == len(task["notes"]):
            return False
        task["notes"] = remaining
        task["updated"] = now_utc()
        return True

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(list(self.tasks.values()))

    def get_task(self, id: EntityId) -> Task:
        return deepcopy(self.tasks[id])

    def __requirement_ids(
        self, exclude_task_id: Optional[EntityId] = None
    ) -> set[EntityId]:
        return {
            requirement["id"]
            for task_id, task in self.tasks.items()
            if task_id != exclude_task_id
            for requirement in task["requirements"]
        }

    def __owned_copy(
        self, requirement: Requirement, taken: set[EntityId]
    ) -> Requirement:
        owned = deepcopy(requirement)
        if owned["id"] in taken:
            owned["id"] = generate_entity_id()
        taken.add(owned["id"])
        return owned


TASK_REPO = TaskRepository()
