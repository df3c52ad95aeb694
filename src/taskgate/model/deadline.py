# SPDX-License-Identifier: MIT

from typing import TypedDict


class Deadline(TypedDict):
    """
    Wrapper around a single deadline timestamp.

    The timestamp is always stored as "DD/MM/YYYYT00:00:01Z". Changing a
    deadline replaces the timestamp inside the existing wrapper.
    """

    timestamp: str
