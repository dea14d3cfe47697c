from typing import Dict, NamedTuple

from bitarray import bitarray

from .huffman import HuffmanCompressor
from .tree import format_tree


class CompressionResult(NamedTuple):
    codes: Dict[str, str]
    bits: bitarray
    decoded: str
    frequencies: Dict[str, int]
    tree_text: str


def compress_text(text: str, verbose: bool = False) -> CompressionResult:
    """
    Runs the whole pipeline over one text: analysis, tree building,
    encoding and decoding of the encoded stream.

    Parameters:
    text (str): The text to compress.
    verbose (bool): Print the intermediate results to standard output.

    Returns:
    CompressionResult: Per-character codes, the encoded bits and the decoded
        text, plus the frequencies and the rendered tree.
    """
    compressor = HuffmanCompressor(verbose=verbose)
    bits = compressor.compress(text)
    decoded = compressor.decompress(bits)
    return CompressionResult(
        codes=compressor.codes(),
        bits=bits,
        decoded=decoded,
        frequencies=compressor.frequencies(),
        tree_text=format_tree(compressor.tree),
    )
