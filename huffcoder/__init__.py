from .coder import PLACEHOLDER_BIT, code_for, code_table, decode, encode
from .compression import CompressionResult, compress_text
from .errors import (
    EmptyInputError,
    EmptyQueueError,
    HuffmanError,
    TruncatedStreamError,
    UnknownCharacterError,
)
from .frequency import analyze
from .huffman import HuffmanCompressor
from .priority_queue import PriorityQueue
from .tree import HuffmanTree, Internal, Leaf, build_tree, format_tree
