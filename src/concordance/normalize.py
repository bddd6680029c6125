from __future__ import annotations
from .config import DEFAULT_CONFIG, TokenizerConfig


def clean_token(token: str, config: TokenizerConfig = DEFAULT_CONFIG) -> str:
    """
    Normalize one raw word token into its concordance key.

    Rules:
      * strip trim chars, then sentence separators, then word separators
        (three passes in that order; each pass can expose the next class)
      * if the abbreviation mark still occurs after the first character,
        append exactly one mark: "e.g" -> "e.g."
      * lowercase
    """
    cleaned = token.strip(config.trim_chars)
    cleaned = cleaned.strip(config.sentence_separators)
    cleaned = cleaned.strip(config.word_separators)

    if cleaned.find(config.abbreviation_mark) > 0:
        cleaned = f"{cleaned}{config.abbreviation_mark}"

    return cleaned.lower()


def is_blank(word: str) -> bool:
    """True for empty or whitespace-only strings; such tokens are never indexed."""
    return not word or word.isspace()
