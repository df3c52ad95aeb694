# SPDX-License-Identifier: MIT

from taskgate.model.entity_id import generate_entity_id
from taskgate.model.note import Note
from taskgate.time import now_utc


def get_note_template(text: str) -> Note:
    now = now_utc()
    return {
        "id": generate_entity_id(),
        "text": text,
        "created": now,
        "updated": now,
    }
