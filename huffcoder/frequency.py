from collections import Counter
from typing import Dict

from .errors import EmptyInputError
from .tree import Leaf


def analyze(text: str) -> Dict[str, Leaf]:
    """
    Counts every distinct character of the text.

    Parameters:
    text (str): The text to analyze.

    Returns:
    Dict[str, Leaf]: One leaf per distinct character, in order of first
        occurrence.
    """
    if not isinstance(text, str):
        raise TypeError("Input text must be a string.")
    if not text:
        raise EmptyInputError("Cannot analyze an empty text.")
    return {char: Leaf(char, weight) for char, weight in Counter(text).items()}
