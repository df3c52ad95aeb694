# SPDX-License-Identifier: MIT

from taskgate.repository.dependency import DependencyRepository


def test_edges_keep_insertion_order_and_duplicates() -> None:
    repo = DependencyRepository()
    repo.add_dependency("a", "c")
    repo.add_dependency("a", "b")
    repo.add_dependency("a", "c")

    assert repo.get_dependency_ids("a") == ["c", "b", "c"]
    assert repo.has_dependencies("a")
    assert not repo.has_dependencies("b")

    assert repo.remove_dependency("a", "c")
    assert repo.get_dependency_ids("a") == ["b", "c"]
    assert repo.contains_dependency("a", "c")


def test_replace_dependencies_swaps_the_whole_list() -> None:
    repo = DependencyRepository()
    repo.add_dependency("a", "b")

    repo.replace_dependencies("a", ["c", "d"])

    assert repo.get_dependency_ids("a") == ["c", "d"]
    assert repo.dependencies == [
        {"dependent_id": "a", "dependency_id": "c"},
        {"dependent_id": "a", "dependency_id": "d"},
    ]


def test_remove_task_drops_inbound_and_outbound_edges() -> None:
    repo = DependencyRepository()
    repo.add_dependency("a", "b")
    repo.add_dependency("b", "c")
    repo.add_dependency("d", "b")
    repo.add_dependency("d", "c")

    assert repo.get_dependent_ids("b") == ["a", "d"]
    assert repo.remove_task("b") == 3

    assert repo.get_dependency_ids("a") == []
    assert repo.get_dependency_ids("d") == ["c"]
    assert repo.get_dependent_ids("c") == ["d"]


def test_get_all_dependencies_returns_copies() -> None:
    repo = DependencyRepository()
    repo.add_dependency("a", "b")

    edges = repo.get_all_dependencies()
    edges[0]["dependency_id"] = "z"

    assert repo.get_dependency_ids("a") == ["b"]


def test_empty_edge_lists_are_pruned() -> None:
    repo = DependencyRepository()
    repo.add_dependency("a", "b")
    repo.add_dependency("c", "b")
    repo.add_dependency("d", "e")

    repo.replace_dependencies("a", [])
    assert repo.get_all_dependent_ids() == ["c", "d"]

    assert repo.remove_dependency("d", "e")
    assert repo.get_all_dependent_ids() == ["c"]

    assert repo.remove_task("b") == 1
    assert repo.get_all_dependent_ids() == []
