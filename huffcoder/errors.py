class HuffmanError(Exception):
    """Base class for every error raised by the Huffman pipeline."""


class EmptyInputError(HuffmanError, ValueError):
    """There are no characters to build a tree from."""


class UnknownCharacterError(HuffmanError, ValueError):
    """A character (or leaf) has no code in the supplied tree."""


class TruncatedStreamError(HuffmanError, ValueError):
    """The bit stream ended in the middle of a code."""


class EmptyQueueError(HuffmanError, IndexError):
    """A priority queue was read while empty."""
