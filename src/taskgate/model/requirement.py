# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskgate.model.entity_id import EntityId


class Requirement(TypedDict):
    id: EntityId
    name: str
    details: Optional[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime
    completed: Optional[pendulum.DateTime]
