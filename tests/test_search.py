"""Tests for utils/algorithms/search.py"""

import logging

from utils.algorithms.search import DepthFirstEnumerator


def up_to_three(k: int) -> list[int]:
    return [k + 1, k + 2] if k <= 3 else []


class TestDepthFirstEnumerator:
    def test_order(self):
        """The last successor pushed is the next node returned."""
        assert list(DepthFirstEnumerator(0, up_to_three)) == [0, 2, 4, 3, 5, 1]

    def test_each_node_once(self):
        nodes = list(DepthFirstEnumerator(0, up_to_three))
        assert sorted(nodes) == [0, 1, 2, 3, 4, 5]

    def test_cycle(self):
        graph = {"A": ["B"], "B": ["C"], "C": ["A", "B"]}
        assert list(DepthFirstEnumerator("A", graph.__getitem__)) == ["A", "B", "C"]

    def test_single_node(self):
        assert list(DepthFirstEnumerator("A", lambda _: [])) == ["A"]

    def test_normalize_applies_to_root_and_successors(self):
        """Successors are deduplicated after normalization."""
        def successors(k: int) -> list[int]:
            return [k + 1, k + 2] if k < 8 else []

        nodes = list(DepthFirstEnumerator(1, successors, lambda k: k - k % 2))
        assert nodes == [0, 2, 4, 6, 8]

    def test_key(self):
        """Nodes with the same key are the same node."""
        def successors(s: str) -> list[str]:
            return [s.upper(), s + "b"] if len(s) < 2 else []

        nodes = list(DepthFirstEnumerator("a", successors, key=str.lower))
        assert nodes == ["a", "ab"]

    def test_exhausted(self):
        enumerator = DepthFirstEnumerator(0, up_to_three)
        assert len(list(enumerator)) == 6
        assert list(enumerator) == []

    def test_iter_returns_self(self):
        enumerator = DepthFirstEnumerator(0, up_to_three)
        assert iter(enumerator) is enumerator

    def test_logs_final_count(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="utils.algorithms.search"):
            list(DepthFirstEnumerator(0, up_to_three))
        assert "Enumeration done: 6 node(s)" in caplog.text
