# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskgate.model.deadline import Deadline
from taskgate.model.entity_id import EntityId
from taskgate.model.note import Note
from taskgate.model.requirement import Requirement
from taskgate.model.task_type import TaskType


class Task(TypedDict):
    id: Optional[EntityId]
    name: str
    details: Optional[str]
    deadline: Deadline
    weighting: int
    type: Optional[TaskType]
    requirements: list[Requirement]
    notes: list[Note]
    checked_complete: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime
