"""Node storage for the search tree.

Nodes live in a flat list and refer to each other by integer handle.
Re-rooting copies the surviving subtree into a fresh arena, so dropping
every sibling subtree is a single list replacement.
"""

from dataclasses import replace
from typing import Iterator, List, Tuple

from .node import Node

ROOT = 0


class NodeArena:
    """Owns every node of one search tree."""

    def __init__(self, root: Node):
        self.nodes: List[Node] = [root]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> Node:
        return self.nodes[ROOT]

    def add(self, node: Node) -> int:
        """Store a node and return its handle."""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def get(self, handle: int) -> Node:
        return self.nodes[handle]

    def children_of(self, handle: int) -> List[Node]:
        return [self.nodes[child] for _, child in self.nodes[handle].children]

    def iter_handles(self, start: int = ROOT) -> Iterator[Tuple[int, int]]:
        """Depth-first (handle, depth) pairs of the subtree under ``start``."""
        stack = [(start, 0)]
        while stack:
            handle, depth = stack.pop()
            yield handle, depth
            for _, child in reversed(self.nodes[handle].children):
                stack.append((child, depth + 1))

    def reroot(self, handle: int) -> "NodeArena":
        """New arena holding only the subtree under ``handle``.

        The old arena is left untouched; statistics are carried over
        unchanged and handles are renumbered with the new root at 0.
        """
        order = [h for h, _ in self.iter_handles(handle)]
        remap = {old: new for new, old in enumerate(order)}

        copied = []
        for old in order:
            node = self.nodes[old]
            copied.append(replace(
                node,
                children=[(action, remap[child]) for action, child in node.children],
                unexpanded_actions=list(node.unexpanded_actions),
            ))

        arena = NodeArena(copied[0])
        arena.nodes = copied
        return arena


def count_nodes(arena: NodeArena) -> int:
    """Count nodes reachable from the root."""
    return sum(1 for _ in arena.iter_handles())


def count_terminal(arena: NodeArena) -> int:
    """Count terminal nodes reachable from the root."""
    return sum(1 for handle, _ in arena.iter_handles() if arena.get(handle).is_terminal())


def max_depth(arena: NodeArena) -> int:
    return max(depth for _, depth in arena.iter_handles())


def get_statistics(arena: NodeArena) -> dict:
    """Get tree statistics."""
    return {
        "total_nodes": count_nodes(arena),
        "terminal_nodes": count_terminal(arena),
        "max_depth": max_depth(arena),
        "root_visits": arena.root.visit_count,
        "root_Q": arena.root.Q,
    }
