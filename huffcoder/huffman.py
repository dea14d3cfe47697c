from typing import Dict, Optional

from bitarray import bitarray

from .coder import code_table, decode, encode
from .frequency import analyze
from .tree import HuffmanTree, build_tree, format_tree


class HuffmanCompressor:
    """
    Compresses a text with a Huffman code built from that same text.

    The tree of the last ``compress`` call is kept so that its output can be
    decompressed again. Every text gets its own tree.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.tree: Optional[HuffmanTree] = None
        self.leaves = None

    def build_tree(self, text: str) -> HuffmanTree:
        """
        Analyzes the text and builds its Huffman tree.

        Parameters:
        text (str): The text to build the tree from.

        Returns:
        HuffmanTree: The new tree, also stored on the compressor.
        """
        leaves = analyze(text)
        tree = build_tree(leaves)
        self.leaves, self.tree = leaves, tree

        if self.verbose:
            print(f"[DEBUG] Frequencies: {self.frequencies()}")
            print(format_tree(tree))
        return tree

    def compress(self, text: str) -> bitarray:
        """
        Compresses the given text.

        Parameters:
        text (str): The text to compress.

        Returns:
        bitarray: The encoded bit stream.
        """
        tree = self.build_tree(text)
        compressed = encode(tree, self.leaves, text)
        if self.verbose:
            print(f"[DEBUG] Compressed bits ({len(compressed)} bits): {compressed.to01()[:64]}")
        return compressed

    def decompress(self, compressed) -> str:
        """
        Decompresses a bit stream produced by the last ``compress`` call.

        Parameters:
        compressed (bitarray): The encoded bit stream.

        Returns:
        str: The decoded text.
        """
        if self.tree is None:
            raise ValueError("No tree available, compress a text first.")
        text = decode(self.tree, compressed)
        if self.verbose:
            print(f"[DEBUG] Decompressed {len(text)} characters")
        return text

    def codes(self) -> Dict[str, str]:
        if self.tree is None:
            return {}
        return {char: code.to01() for char, code in code_table(self.tree).items()}

    def frequencies(self) -> Dict[str, int]:
        if self.leaves is None:
            return {}
        return {char: leaf.frequency for char, leaf in self.leaves.items()}
