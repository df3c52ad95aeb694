# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskgate.model.task import Task
from taskgate.model.task_type import TaskType
from taskgate.time import date_to_deadline_timestamp, now_utc


def get_task_template(
    name: str,
    details: Optional[str],
    deadline: pendulum.Date,
    weighting: int,
    type: Optional[TaskType],
) -> Task:
    now = now_utc()
    return {
        "id": None,
        "name": name,
        "details": details,
        "deadline": {"timestamp": date_to_deadline_timestamp(deadline)},
        "weighting": weighting,
        "type": type,
        "requirements": [],
        "notes": [],
        "checked_complete": False,
        "created": now,
        "updated": now,
    }
