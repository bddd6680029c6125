"""
Concordance index.

Maps every normalized word to a WordEntry holding the sentence index of each
occurrence, and renders the alphabetical {count:indices} report.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional

from .config import FIELD_SEPARATOR
from .models import ConcordanceRow, Occurrence, WordEntry
from .normalize import is_blank


class ConcordanceIndex:
    """
    Accumulates (word, sentence_index) pairs.

    The index trusts the caller's ordering: indices are appended in call
    order and never sorted or validated. Rendering is a pure read over the
    current state, so it can be repeated at any time with the same result.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, WordEntry] = {}

    # ---- accumulate ----

    def record(self, word: str, sentence_index: int) -> Optional[WordEntry]:
        """
        Add one occurrence of ``word`` in sentence ``sentence_index``.

        Args:
            word (str): Normalized word. Empty or whitespace-only words are dropped.
            sentence_index (int): Zero-based sentence index.

        Returns:
            Optional[WordEntry]: The entry after the occurrence was appended,
            or None when the word was dropped.
        """
        if is_blank(word):
            return None
        entry = self._entries.get(word)
        if entry is None:
            entry = self._entries.setdefault(word, WordEntry(word))
        entry.add(sentence_index)
        return entry

    def record_all(self, occurrences: Iterable[Occurrence]) -> int:
        """Record every Occurrence in order; returns how many were recorded."""
        n = 0
        for occ in occurrences:
            if self.record(occ.word, occ.sentence_index) is not None:
                n += 1
        return n

    def merge(self, other: "ConcordanceIndex") -> None:
        """
        Append ``other``'s occurrences after this index's, word by word.

        Used to combine partitions built separately. Partitions must carry
        global sentence indices and be merged in document order.
        """
        for word, entry in other._entries.items():
            if is_blank(word):
                continue
            mine = self._entries.setdefault(word, WordEntry(word))
            mine.sentence_indices.extend(entry.sentence_indices)

    # ---- read ----

    def get(self, word: str) -> Optional[WordEntry]:
        return self._entries.get(word)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def rows(self) -> List[ConcordanceRow]:
        """Snapshot of all entries, sorted by word using ordinal comparison."""
        return [ConcordanceRow.from_entry(self._entries[w]) for w in sorted(self._entries)]

    def render(self, separator: str = FIELD_SEPARATOR) -> List[str]:
        """One ``<word><separator>{N:i0,...}`` line per distinct word, alphabetically."""
        return [f"{row.word}{separator}{row.record}" for row in self.rows()]

    def to_text(self, separator: str = FIELD_SEPARATOR) -> str:
        return "\n".join(self.render(separator))

    def to_dict(self) -> Dict[str, dict]:
        """``{word: {"count": N, "sentences": [...]}}`` in sorted word order."""
        return {
            row.word: {"count": row.count, "sentences": list(row.sentence_indices)}
            for row in self.rows()
        }
