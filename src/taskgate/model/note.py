# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from taskgate.model.entity_id import EntityId


class Note(TypedDict):
    id: EntityId
    text: str
    created: pendulum.DateTime
    updated: pendulum.DateTime
