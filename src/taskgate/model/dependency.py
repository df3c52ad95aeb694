# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskgate.model.entity_id import EntityId


class Dependency(TypedDict):
    """
    Directed edge: the dependent task cannot be checked complete until the
    dependency task is complete. Edges never own either task.
    """

    dependent_id: EntityId
    dependency_id: EntityId
