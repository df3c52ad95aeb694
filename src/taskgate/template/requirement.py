# SPDX-License-Identifier: MIT

from typing import Optional

from taskgate.model.entity_id import generate_entity_id
from taskgate.model.requirement import Requirement
from taskgate.time import now_utc


def get_requirement_template(name: str, details: Optional[str] = None) -> Requirement:
    now = now_utc()
    return {
        "id": generate_entity_id(),
        "name": name,
        "details": details,
        "created": now,
        "updated": now,
        "completed": None,
    }
