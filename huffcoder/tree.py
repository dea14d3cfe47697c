"""
Huffman tree nodes and the greedy tree builder.

The tree is stored as an arena: ``HuffmanTree.nodes`` owns every node, and
nodes refer to each other (``left``, ``right``, ``parent``) by their index
in that list.
"""

from collections.abc import Mapping
from typing import List, Optional

from .errors import EmptyInputError
from .priority_queue import PriorityQueue


class Leaf:
    """A single distinct character and the number of times it occurs."""

    __slots__ = ("character", "frequency", "index", "parent")

    def __init__(self, character: str, frequency: int):
        self.character = character
        self.frequency = frequency
        self.index: Optional[int] = None
        self.parent: Optional[int] = None

    def __repr__(self):
        return f"Leaf({self.character!r}, {self.frequency})"


class Internal:
    """The merge of two sub-trees. ``left`` and ``right`` are arena indices."""

    __slots__ = ("frequency", "left", "right", "index", "parent")

    def __init__(self, frequency: int, left: int, right: int):
        self.frequency = frequency
        self.left = left
        self.right = right
        self.index: Optional[int] = None
        self.parent: Optional[int] = None

    def __repr__(self):
        return f"Internal({self.frequency}, left={self.left}, right={self.right})"


class HuffmanTree:
    def __init__(self, nodes: list, root_index: int):
        self.nodes = nodes
        self.root_index = root_index

    @property
    def root(self):
        return self.nodes[self.root_index]

    def parent_of(self, node):
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def left_of(self, node: Internal):
        return self.nodes[node.left]

    def right_of(self, node: Internal):
        return self.nodes[node.right]

    def leaves(self) -> List[Leaf]:
        return [node for node in self.nodes if isinstance(node, Leaf)]

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"HuffmanTree(root={self.root!r}, nodes={len(self.nodes)})"


def _append(nodes: list, node) -> None:
    node.index = len(nodes)
    nodes.append(node)


def build_tree(leaves) -> HuffmanTree:
    """
    Builds a Huffman tree by repeatedly merging the two lowest-frequency nodes.

    The first node extracted in a merge becomes the left child. With a
    single leaf no merge happens and the leaf itself is the root.

    Parameters:
    leaves (dict | iterable): The mapping returned by ``analyze`` or any
        iterable of ``Leaf`` objects.

    Returns:
    HuffmanTree: The finished tree; ``tree.root`` is its root node.
    """
    if isinstance(leaves, Mapping):
        leaves = list(leaves.values())
    else:
        leaves = list(leaves)
    if not leaves:
        raise EmptyInputError("Cannot build a tree without any leaves.")

    # nothing is attached until every leaf has been checked
    for leaf in leaves:
        if not isinstance(leaf, Leaf):
            raise TypeError(f"Expected a Leaf, got {type(leaf).__name__}.")
        if leaf.index is not None:
            raise ValueError(f"{leaf!r} already belongs to a tree.")

    nodes = []
    queue = PriorityQueue()
    for leaf in leaves:
        _append(nodes, leaf)
        queue.insert(leaf)

    while queue.size() > 1:
        left = queue.extract_min()
        right = queue.extract_min()
        merged = Internal(left.frequency + right.frequency, left.index, right.index)
        _append(nodes, merged)
        left.parent = merged.index
        right.parent = merged.index
        queue.insert(merged)

    return HuffmanTree(nodes, queue.extract_min().index)


def format_tree(tree: HuffmanTree) -> str:
    """
    Renders the tree sideways, one node per line, indented with tabs by depth.

    Left subtrees are printed above their parent's frequency and right
    subtrees below it; leaves show their character and frequency.
    """
    lines = []

    def walk(index: int, depth: int) -> None:
        node = tree.nodes[index]
        if isinstance(node, Leaf):
            lines.append("\t" * depth + f"{node.character!r} ({node.frequency})")
            return
        walk(node.left, depth + 1)
        lines.append("\t" * depth + str(node.frequency))
        walk(node.right, depth + 1)

    walk(tree.root_index, 0)
    return "\n".join(lines)
