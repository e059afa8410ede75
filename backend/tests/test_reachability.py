"""Reachability analyzer tests."""

from framework_validation.validators import reachable_from
from framework_validation.validators.reachability import build_adjacency


class TestReachableFrom:
    def test_seeds_are_included(self, make_relationship) -> None:
        assert reachable_from(["start"], []) == frozenset({"start"})

    def test_linear_chain(self, make_relationship) -> None:
        rels = [
            make_relationship("start", "task"),
            make_relationship("task", "end"),
        ]
        assert reachable_from(["start"], rels) == frozenset({"start", "task", "end"})

    def test_edges_are_directed(self, make_relationship) -> None:
        rels = [make_relationship("task", "start")]
        assert reachable_from(["start"], rels) == frozenset({"start"})

    def test_cycle_terminates(self, make_relationship) -> None:
        rels = [
            make_relationship("start", "a"),
            make_relationship("a", "b"),
            make_relationship("b", "a"),
            make_relationship("b", "end"),
            make_relationship("end", "start"),
        ]
        assert reachable_from(["start"], rels) == frozenset({"start", "a", "b", "end"})

    def test_self_loop(self, make_relationship) -> None:
        rels = [make_relationship("start", "start")]
        assert reachable_from(["start"], rels) == frozenset({"start"})

    def test_multiple_seeds(self, make_relationship) -> None:
        rels = [
            make_relationship("s1", "a"),
            make_relationship("s2", "b"),
            make_relationship("c", "d"),
        ]
        assert reachable_from(["s1", "s2"], rels) == frozenset({"s1", "s2", "a", "b"})

    def test_large_chain_without_recursion_limit(self, make_relationship) -> None:
        rels = [make_relationship(f"n{i}", f"n{i + 1}") for i in range(5000)]
        reachable = reachable_from(["n0"], rels)
        assert len(reachable) == 5001
        assert "n5000" in reachable

    def test_empty_seeds(self, make_relationship) -> None:
        rels = [make_relationship("a", "b")]
        assert reachable_from([], rels) == frozenset()


class TestBuildAdjacency:
    def test_preserves_relationship_order(self, make_relationship) -> None:
        rels = [
            make_relationship("gw", "b"),
            make_relationship("gw", "a"),
        ]
        assert build_adjacency(rels)["gw"] == ["b", "a"]
