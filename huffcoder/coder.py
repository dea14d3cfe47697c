"""
Turns text into Huffman codes and back.

A left branch is written as bit 1 and a right branch as bit 0. When the
tree is a single leaf every occurrence of its character is written as one
``PLACEHOLDER_BIT``, and on decode every bit stands for one occurrence,
whether or not it equals ``PLACEHOLDER_BIT``.
"""

from typing import Dict, Mapping

from bitarray import bitarray

from .errors import TruncatedStreamError, UnknownCharacterError
from .tree import HuffmanTree, Internal, Leaf

PLACEHOLDER_BIT = 0


def code_for(tree: HuffmanTree, leaf: Leaf) -> bitarray:
    """
    Derives the root-to-leaf code of a leaf by walking its parent links.

    Parameters:
    tree (HuffmanTree): The tree the leaf belongs to.
    leaf (Leaf): The leaf to find the code of.

    Returns:
    bitarray: The code, empty when the leaf is the root itself.
    """
    path = bitarray(endian="big")
    node = leaf
    while node.parent is not None:
        parent = tree.nodes[node.parent] if node.parent < len(tree.nodes) else None
        if not isinstance(parent, Internal):
            raise UnknownCharacterError(f"{leaf!r} does not belong to this tree.")
        if tree.nodes[parent.left] is node:
            path.append(1)
        elif tree.nodes[parent.right] is node:
            path.append(0)
        else:
            raise UnknownCharacterError(f"{leaf!r} does not belong to this tree.")
        node = parent
    if node is not tree.root:
        raise UnknownCharacterError(f"{leaf!r} does not belong to this tree.")
    path.reverse()
    return path


def _emitted_code(tree: HuffmanTree, leaf: Leaf) -> bitarray:
    code = code_for(tree, leaf)
    if len(code) == 0:
        code = bitarray([PLACEHOLDER_BIT], endian="big")
    return code


def code_table(tree: HuffmanTree) -> Dict[str, bitarray]:
    """Returns the code written for each character of the tree."""
    return {leaf.character: _emitted_code(tree, leaf) for leaf in tree.leaves()}


def encode(tree: HuffmanTree, leaves: Mapping[str, Leaf], text: str) -> bitarray:
    """
    Encodes the text by concatenating the code of each of its characters.

    Parameters:
    tree (HuffmanTree): The tree built from ``leaves``.
    leaves (Mapping[str, Leaf]): Character to leaf, as returned by ``analyze``.
    text (str): The text to encode.

    Returns:
    bitarray: The encoded bit stream.
    """
    if not isinstance(text, str):
        raise TypeError("Input text must be a string.")
    codes = {}
    for char in dict.fromkeys(text):
        leaf = leaves.get(char)
        if leaf is None:
            raise UnknownCharacterError(f"Character {char!r} has no code in this tree.")
        codes[char] = _emitted_code(tree, leaf)

    encoded = bitarray(endian="big")
    for char in text:
        encoded.extend(codes[char])
    return encoded


def decode(tree: HuffmanTree, bits) -> str:
    """
    Decodes a bit stream by walking the tree from the root for each character.

    When the tree is a single leaf, each bit decodes to one occurrence of
    its character whatever the bit's value, so ``"1111"`` decodes the same
    as ``"0000"``.

    Parameters:
    tree (HuffmanTree): The tree the stream was encoded with.
    bits (bitarray | str | list): The encoded bit stream.

    Returns:
    str: The decoded text.
    """
    if not isinstance(bits, bitarray):
        bits = bitarray(bits, endian="big")

    root = tree.root
    if isinstance(root, Leaf):
        return root.character * len(bits)

    output = []
    node = root
    for bit in bits:
        node = tree.nodes[node.left if bit else node.right]
        if isinstance(node, Leaf):
            output.append(node.character)
            node = root
    if node is not root:
        raise TruncatedStreamError(
            f"Bit stream ended inside a code after {len(output)} decoded characters."
        )
    return "".join(output)
