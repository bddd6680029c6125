# src/concordance/models.py
"""
Data models for the concordance builder.

This module defines three small containers:

- Occurrence: one normalized word found in one sentence (tokenizer output).
- WordEntry: the mutable accumulator for one distinct word.
- ConcordanceRow: an immutable snapshot of a WordEntry used for reporting.

The classes hold no tokenization logic; they only structure the data so that
tokenizing, accumulating and rendering stay simple and predictable.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


def format_record(sentence_indices) -> str:
    """Render indices as the ``{N:i0,i1,...}`` record; ``{0:}`` when empty."""
    joined = ",".join(str(i) for i in sentence_indices)
    return f"{{{len(sentence_indices)}:{joined}}}"


@dataclass(frozen=True, slots=True)
class Occurrence:
    """
    A single word occurrence emitted by the tokenizer.

    Attributes
    ----------
    sentence_index : int
        Zero-based index of the sentence in the split sequence, counting
        empty sentences produced by consecutive separators.
    word : str
        The cleaned, lowercased token. Never empty or whitespace-only.
    """
    sentence_index: int
    word: str


@dataclass(slots=True)
class WordEntry:
    """
    Accumulates every occurrence of one distinct word.

    Attributes
    ----------
    word : str
        Normalized word; the unique key in the index.
    sentence_indices : List[int]
        Sentence index of each occurrence in discovery order. Duplicates are
        meaningful (a word seen twice in sentence 2 contributes ``2, 2``).
    """
    word: str
    sentence_indices: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        # derived, so count == len(sentence_indices) always holds
        return len(self.sentence_indices)

    def add(self, sentence_index: int) -> None:
        self.sentence_indices.append(sentence_index)

    def __str__(self) -> str:
        return format_record(self.sentence_indices)


@dataclass(frozen=True, slots=True)
class ConcordanceRow:
    """
    One line of the final report.

    Attributes
    ----------
    word : str
        The normalized word.
    count : int
        Number of occurrences; equals ``len(sentence_indices)``.
    sentence_indices : Tuple[int, ...]
        Sentence indices in the order they were recorded.
    """
    word: str
    count: int
    sentence_indices: Tuple[int, ...]

    @classmethod
    def from_entry(cls, entry: WordEntry) -> "ConcordanceRow":
        return cls(entry.word, entry.count, tuple(entry.sentence_indices))

    @property
    def record(self) -> str:
        return format_record(self.sentence_indices)

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "count": self.count,
            "sentences": list(self.sentence_indices),
            "record": self.record,
        }
