"""
Text normalization for TF-IDF.
Turns a free-text description into a sequence of lowercase, punctuation-free tokens.
"""

import re  # punctuation stripping
from typing import Iterator, List

# Anything that is neither a word character nor whitespace gets dropped
RE_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


class TokenSequence:
	"""
	Lazy, restartable view over the normalized tokens of one text.
	Nothing is computed until iteration; every iteration starts from the raw text again.
	"""

	__slots__ = ("text",)

	def __init__(self, text: str):
		self.text = text or ""

	def __iter__(self) -> Iterator[str]:
		cleaned = RE_NON_WORD.sub("", self.text.lower())
		# str.split() without arguments collapses whitespace runs and drops empty fragments
		return iter(cleaned.split())

	def __len__(self) -> int:
		return sum(1 for _ in self)

	def __eq__(self, other) -> bool:
		if isinstance(other, TokenSequence):
			return list(self) == list(other)
		if isinstance(other, (list, tuple)):
			return list(self) == list(other)
		return NotImplemented

	def __repr__(self) -> str:
		return f"TokenSequence({list(self)!r})"

	def to_list(self) -> List[str]:
		return list(self)


def preprocess(text: str) -> TokenSequence:
	"""Normalize raw text: lowercase, strip punctuation, split on whitespace."""
	return TokenSequence(text)
