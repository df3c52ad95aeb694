# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional


class TaskType(StrEnum):
    """
    Closed set of task categories.

    Labels are matched case-insensitively and with surrounding whitespace
    ignored, so "Reading", " reading " and "READING" all name the same type.
    """

    OTHER = "other"
    READING = "reading"
    WRITING = "writing"
    RESEARCH = "research"
    PRACTICE = "practice"
    REVISION = "revision"
    MEETING = "meeting"
    EXAM = "exam"

    @classmethod
    def exists(cls, label: Optional[str]) -> bool:
        normalized = cls.__normalize(label)
        return any(normalized == task_type.value for task_type in cls)

    @classmethod
    def get(cls, label: Optional[str]) -> Optional["TaskType"]:
        if not cls.exists(label):
            return None
        return cls(cls.__normalize(label))

    @staticmethod
    def __normalize(label: Optional[str]) -> str:
        if label is None:
            return ""
        return label.strip().lower()
