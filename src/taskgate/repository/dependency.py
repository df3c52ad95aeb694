# SPDX-License-Identifier: MIT

from copy import deepcopy

from taskgate.model.dependency import Dependency
from taskgate.model.entity_id import EntityId


class DependencyRepository:
    """
    Shared index of dependency edges between tasks.

    Edges are kept in insertion order per dependent task. Duplicate edges are
    allowed; removal takes out the first matching edge only.
    """

    def __init__(self) -> None:
        self._edges: dict[EntityId, list[Dependency]] = {}

    @property
    def dependencies(self) -> list[Dependency]:
        return [edge for edges in self._edges.values() for edge in edges]

    def clear(self) -> None:
        self._edges = {}

    def add_dependency(self, dependent_id: EntityId, dependency_id: EntityId) -> None:
        self._edges.setdefault(dependent_id, []).append(
            {"dependent_id": dependent_id, "dependency_id": dependency_id}
        )

    def replace_dependencies(
        self, dependent_id: EntityId, dependency_ids: list[EntityId]
    ) -> None:
        self._edges[dependent_id] = [
            {"dependent_id": dependent_id, "dependency_id": dependency_id}
            for dependency_id in dependency_ids
        ]
        self.__prune(dependent_id)

    def remove_dependency(
        self, dependent_id: EntityId, dependency_id: EntityId
    ) -> bool:
        edges = self._edges.get(dependent_id, [])
        for index, edge in enumerate(edges):
            if edge["dependency_id"] == dependency_id:
                del edges[index]
                self.__prune(dependent_id)
                return True
        return False

    def remove_task(self, task_id: EntityId) -> int:
        """
        Drop every edge that starts or ends at task_id.

        Returns the number of edges removed.
        """
        removed = len(self._edges.pop(task_id, []))
        for dependent_id, edges in list(self._edges.items()):
            remaining = [edge for edge in edges if edge["dependency_id"] != task_id]
            removed += len(edges) - len(remaining)
            edges[:] = remaining
            self.__prune(dependent_id)
        return removed

    def get_all_dependent_ids(self) -> list[EntityId]:
        return list(self._edges.keys())

    def get_dependency_ids(self, dependent_id: EntityId) -> list[EntityId]:
        return [edge["dependency_id"] for edge in self._edges.get(dependent_id, [])]

    def get_dependent_ids(self, dependency_id: EntityId) -> list[EntityId]:
        dependent_ids: list[EntityId] = []
        for dependent_id, edges in self._edges.items():
            if any(edge["dependency_id"] == dependency_id for edge in edges):
                dependent_ids.append(dependent_id)
        return dependent_ids

    def contains_dependency(
        self, dependent_id: EntityId, dependency_id: EntityId
    ) -> bool:
        return dependency_id in self.get_dependency_ids(dependent_id)

    def has_dependencies(self, dependent_id: EntityId) -> bool:
        return len(self._edges.get(dependent_id, [])) > 0

    def get_all_dependencies(self) -> list[Dependency]:
        return deepcopy(self.dependencies)

    def __prune(self, dependent_id: EntityId) -> None:
        if not self._edges.get(dependent_id):
            self._edges.pop(dependent_id, None)


DEPENDENCY_REPO = DependencyRepository()
