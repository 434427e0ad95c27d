"""
Lazy exhaustive search over implicit graphs.

Classes:
    DepthFirstEnumerator(root, successors, normalize, key) - DFS yielding each
        reachable node once

Nodes may be reached along several paths: the enumerator keeps a `seen` set
of node keys, so cycles and shared descendants are visited once.
"""

import logging
from collections.abc import Hashable
from typing import Callable, Generic, Iterable, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DepthFirstEnumerator(Generic[T]):
    """
    Iterator over every node reachable from `root` through `successors`.

    The state is an explicit frontier stack of (node, successors) frames and
    the set of keys of the nodes already discovered. Each call to `__next__`
    pops a frame, pushes a frame for every successor not seen yet, then returns
    the popped node. The successors of a node are computed when its frame is
    pushed.

    Args:
        root: Seed node, normalized like every other node
        successors: Returns the nodes one step away from a node
        normalize: Applied to the seed and to every successor (default: identity)
        key: Identity of a node for deduplication (default: the node itself)

    An enumerator is consumed once, like any Python iterator.

    Example:
        >>> list(DepthFirstEnumerator(0, lambda k: [k + 1, k + 2] if k <= 3 else []))
        [0, 2, 4, 3, 5, 1]
    """

    def __init__(
        self,
        root: T,
        successors: Callable[[T], Iterable[T]],
        normalize: Callable[[T], T] | None = None,
        key: Callable[[T], Hashable] | None = None,
    ) -> None:
        self.successors = successors
        self.normalize = normalize if normalize is not None else _identity
        self.key = key if key is not None else _identity

        root = self.normalize(root)
        self.seen: set[Hashable] = {self.key(root)}
        self.stack: list[tuple[T, list[T]]] = []
        self.yielded = 0
        self._push(root)

    def _push(self, node: T) -> None:
        children = [self.normalize(child) for child in self.successors(node)]
        self.stack.append((node, children))

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.stack:
            logger.debug(f"Enumeration done: {self.yielded} node(s)")
            raise StopIteration

        node, children = self.stack.pop()
        for child in children:
            child_key = self.key(child)
            if child_key not in self.seen:
                self.seen.add(child_key)
                self._push(child)

        self.yielded += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Node {self.yielded}: {len(children)} successor(s), "
                f"{len(self.stack)} frame(s) on the stack"
            )
        return node


def _identity(x):
    return x


__all__ = ["DepthFirstEnumerator"]
