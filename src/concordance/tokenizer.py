"""
Sentence and word tokenization with abbreviation protection.

The text is split into sentences on any sentence separator. Abbreviations
such as "e.g." are masked first (their dots swapped for MASK_CHAR) so the
split does not break them, and unmasked again per sentence before the
words are extracted and cleaned.
"""

from __future__ import annotations
import logging
import re
from typing import Iterator, List

from .config import DEFAULT_CONFIG, TokenizerConfig
from .models import Occurrence
from .normalize import clean_token, is_blank

log = logging.getLogger(__name__)


def _char_class(chars: str) -> re.Pattern[str]:
    return re.compile("[" + "".join(re.escape(c) for c in chars) + "]")


def _masked(abbr: str, config: TokenizerConfig) -> str:
    return abbr.replace(config.abbreviation_mark, config.mask_char)


def mask_abbreviations(text: str, config: TokenizerConfig = DEFAULT_CONFIG) -> str:
    """Replace every literal abbreviation with its masked form, in configured order."""
    for abbr in config.abbreviations:
        text = text.replace(abbr, _masked(abbr, config))
    return text


def unmask_abbreviations(text: str, config: TokenizerConfig = DEFAULT_CONFIG) -> str:
    """Inverse of mask_abbreviations."""
    for abbr in config.abbreviations:
        text = text.replace(_masked(abbr, config), abbr)
    return text


def split_sentences(text: str, config: TokenizerConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Split text into sentences.

    Every separator occurrence is a boundary, so "Hi.." yields ["Hi", "", ""];
    empty sentences are kept because they still occupy a sentence index.
    """
    if config.mask_char in text:
        # masking is not reversible when the sentinel is already present
        log.warning(
            "input contains mask char %r; abbreviation handling may be corrupted",
            config.mask_char,
        )
    masked = mask_abbreviations(text, config)
    parts = _char_class(config.sentence_separators).split(masked)
    return [unmask_abbreviations(p, config) for p in parts]


def split_words(sentence: str, config: TokenizerConfig = DEFAULT_CONFIG) -> List[str]:
    """Split a sentence into raw tokens on any word separator (empty tokens kept)."""
    if not config.word_separators:
        return [sentence]
    return _char_class(config.word_separators).split(sentence)


class Tokenizer:
    """
    Turns raw text into ordered Occurrence pairs.

    Words come out left to right and sentence indices never decrease, which
    is the order ConcordanceIndex.record relies on.
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def sentences(self, text: str) -> List[str]:
        return split_sentences(text, self.config)

    def words(self, sentence: str) -> Iterator[str]:
        for token in split_words(sentence, self.config):
            word = clean_token(token, self.config)
            if not is_blank(word):
                yield word

    def occurrences(self, text: str) -> Iterator[Occurrence]:
        for sentence_index, sentence in enumerate(self.sentences(text)):
            for word in self.words(sentence):
                yield Occurrence(sentence_index, word)
