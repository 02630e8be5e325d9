"""
Reduced Word Tree
=================
Breadth-first generation of the Cayley graph of F2 (a tree) up to a bounded
depth. Every node is a reduced word, reached from the root by appending one
symbol at a time and never appending the inverse of the last symbol.

Classes:
    Node: One reduced word in the tree.
    WordTree: The generated node set with its root.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
import logging
from typing import Iterator

from banachtarski.config import MIN_DEPTH, MAX_DEPTH
from banachtarski.model.words import SYMBOLS, is_inverse_pair

logger = logging.getLogger(__name__)

# Rank of each generation symbol, used for the sibling order index
EDGE_RANK: dict[str, int] = {symbol: rank for rank, symbol in enumerate(SYMBOLS)}


@dataclass(eq=False)
class Node:
    """
    A reduced word in the tree.

    ``order_index`` only orders nodes for display; identity is ``word``.
    """
    word: str
    depth: int
    order_index: int
    children: list[Node] = field(default_factory=list)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(word={self.word!r}, depth={self.depth}, "
                f"order_index={self.order_index})")

    @property
    def last_symbol(self) -> str:
        """Last symbol of the word, or an empty string for the root."""
        return self.word[-1] if self.word else ""

    @property
    def label(self) -> str:
        return self.word or "ε"


def next_order_index(parent_order: int, edge: str) -> int:
    """Order index of the child reached from a parent through ``edge``."""
    return parent_order * 4 + EDGE_RANK[edge] + 1


def clamp_depth(depth: int) -> int:
    """Clamp ``depth`` into [MIN_DEPTH, MAX_DEPTH], logging when it was out of range."""
    clamped = max(MIN_DEPTH, min(MAX_DEPTH, int(depth)))
    if clamped != depth:
        logger.warning(f"Depth {depth} outside [{MIN_DEPTH}, {MAX_DEPTH}], clamped to {clamped}.")
    return clamped


def expected_node_count(depth: int) -> int:
    """Number of reduced words of length <= depth: 1 + sum(4 * 3**(k-1))."""
    return 1 + sum(4 * 3 ** (k - 1) for k in range(1, depth + 1))


class WordTree:
    """
    The reduced word tree, keyed by word.

    ``nodes`` preserves insertion order, which is breadth-first order.
    """
    def __init__(self, root: Node, nodes: dict[str, Node], max_depth: int) -> None:
        self.root = root
        self.nodes = nodes
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_depth={self.max_depth}, nodes={len(self.nodes)})"

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __contains__(self, word: object) -> bool:
        return word in self.nodes

    def __getitem__(self, word: str) -> Node:
        return self.nodes[word]

    def edges(self) -> Iterator[tuple[Node, Node]]:
        """Yield every (parent, child) pair."""
        for node in self.nodes.values():
            for child in node.children:
                yield node, child

    def levels(self) -> dict[int, list[Node]]:
        """Nodes grouped by depth (ascending), each level sorted by order index."""
        groups: dict[int, list[Node]] = {}
        for node in self.nodes.values():
            groups.setdefault(node.depth, []).append(node)
        return {
            depth: sorted(groups[depth], key=lambda n: n.order_index)
            for depth in sorted(groups)
        }


def build_tree(max_depth: int) -> WordTree:
    """
    Generate every reduced word of length <= ``max_depth``.

    Args:
        max_depth: Generation depth. Values outside [MIN_DEPTH, MAX_DEPTH]
            are clamped rather than rejected.

    Returns:
        The fully populated tree, deterministic for a given depth.
    """
    depth = clamp_depth(max_depth)

    root = Node(word="", depth=0, order_index=0)
    nodes: dict[str, Node] = {root.word: root}

    queue: deque[Node] = deque([root])
    while queue:
        cur = queue.popleft()
        if cur.depth >= depth:
            continue

        for symbol in SYMBOLS:
            if is_inverse_pair(cur.last_symbol, symbol):
                continue

            child_word = cur.word + symbol
            if child_word in nodes:
                # Unreachable with the non-backtracking rule; ignore like a set insert
                logger.debug(f"Duplicate word '{child_word}' skipped.")
                continue

            child = Node(
                word=child_word,
                depth=cur.depth + 1,
                order_index=next_order_index(cur.order_index, symbol),
            )
            nodes[child_word] = child
            cur.children.append(child)
            queue.append(child)

    logger.debug(f"Built word tree of depth {depth} with {len(nodes)} nodes.")
    return WordTree(root=root, nodes=nodes, max_depth=depth)
