import random

import pytest
from bitarray import bitarray

from huffcoder import (
	PLACEHOLDER_BIT,
	Leaf,
	TruncatedStreamError,
	UnknownCharacterError,
	analyze,
	build_tree,
	code_for,
	code_table,
	decode,
	encode,
)


def _roundtrip(text):
	leaves = analyze(text)
	tree = build_tree(leaves)
	return decode(tree, encode(tree, leaves, text))


def test_roundtrip_random_texts():
	rng = random.Random(1234)
	alphabet = "abcdefgh ijklmnop\n.,✓é"
	for n in (1, 2, 3, 17, 500):
		text = "".join(rng.choice(alphabet) for _ in range(n))
		assert _roundtrip(text) == text


def test_roundtrip_all_ascii_once():
	text = "".join(chr(i) for i in range(128))
	assert _roundtrip(text) == text


def test_aabbbc_codes_and_stream():
	leaves = analyze("aabbbc")
	tree = build_tree(leaves)
	codes = {c: code.to01() for c, code in code_table(tree).items()}
	assert codes == {"a": "00", "b": "1", "c": "01"}

	encoded = encode(tree, leaves, "aabbbc")
	assert encoded.to01() == "000011101"
	assert decode(tree, encoded) == "aabbbc"


@pytest.mark.parametrize("text", ["aabbbc", "abracadabra", "mississippi river"])
def test_codes_are_prefix_free(text):
	codes = [code.to01() for code in code_table(build_tree(analyze(text))).values()]
	for a in codes:
		for b in codes:
			if a != b:
				assert not b.startswith(a)


def test_code_for_walks_to_root():
	leaves = analyze("abracadabra")
	tree = build_tree(leaves)
	# 'a' is the most frequent character and gets the shortest code
	lengths = {c: len(code_for(tree, leaf)) for c, leaf in leaves.items()}
	assert lengths["a"] == min(lengths.values())


def test_single_character_text_uses_placeholder_bits():
	leaves = analyze("aaaa")
	tree = build_tree(leaves)
	assert len(code_for(tree, leaves["a"])) == 0

	encoded = encode(tree, leaves, "aaaa")
	assert encoded == bitarray([PLACEHOLDER_BIT] * 4)
	assert decode(tree, encoded) == "aaaa"


def test_encode_unknown_character():
	leaves = analyze("abc")
	tree = build_tree(leaves)
	with pytest.raises(UnknownCharacterError):
		encode(tree, leaves, "abd")


def test_encode_with_foreign_leaf_map():
	tree = build_tree(analyze("abc"))
	other = analyze("abc")
	build_tree(other)
	with pytest.raises(UnknownCharacterError):
		encode(tree, other, "abc")


def test_code_for_unattached_leaf():
	tree = build_tree(analyze("abc"))
	with pytest.raises(UnknownCharacterError):
		code_for(tree, Leaf("z", 1))


def test_decode_truncated_stream():
	tree = build_tree(analyze("aabbbc"))
	# '1' alone is the complete code for 'b', '0' is not a complete code
	with pytest.raises(TruncatedStreamError):
		decode(tree, bitarray("0"))
	with pytest.raises(TruncatedStreamError):
		decode(tree, "0000111010")


def test_decode_single_bit_against_deep_tree():
	leaves = analyze("abcdefgh")
	tree = build_tree(leaves)
	with pytest.raises(TruncatedStreamError):
		decode(tree, bitarray("1"))


def test_decode_accepts_strings_and_lists():
	leaves = analyze("aabbbc")
	tree = build_tree(leaves)
	assert decode(tree, "000011101") == "aabbbc"
	assert decode(tree, [0, 0, 0, 0, 1, 1, 1, 0, 1]) == "aabbbc"
	assert decode(tree, bitarray()) == ""


def test_single_character_tree_decodes_any_bit_value():
	tree = build_tree(analyze("aaaa"))
	assert decode(tree, "1111") == "aaaa"
	assert decode(tree, "0101") == "aaaa"
