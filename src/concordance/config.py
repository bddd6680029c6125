from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

# characters that end a sentence
SENTENCE_SEPARATORS: str = ".!?;"

# characters that delimit words inside a sentence
WORD_SEPARATORS: str = " \r\n"

# punctuation stripped from the edges of a raw word token
TRIM_CHARS: str = " ,:-'\"(){}[]"

# abbreviations whose dots must not end a sentence (exact, case-sensitive match)
ABBREVIATIONS: tuple[str, ...] = ("ex.", "e.g.", "i.e.")

# the separator protected inside abbreviations and re-appended to abbreviation tokens
ABBREVIATION_MARK: str = "."

# /* ~~~ sentinel used while masking abbreviations; must not occur in real input ~~~ */
MASK_CHAR: str = "|"

# between the word and its {count:indices} record in the text report
FIELD_SEPARATOR: str = "\t"

RECOGNIZED_OPTIONS = ("sentence_separators", "word_separators", "trim_chars", "abbreviations")

DEMO_TEXT: str = (
    "A \"concordance\" is an alphabetical list of the words present in a text with a count of how\n\r"
    "often each word appears and citations of where each word appears in the text (e.g., page\n\r"
    "number). Write a program -- in the programming language of your choice -- that will\n\r"
    "generate a concordance of an arbitrary text document written in English: the text can be\n\r"
    "read from stdin, and the program should output the concordance to stdout or a file. For\n\r"
    "each word, it should print the count and the sorted list of citations, in this case the\n\r"
    "zero-indexed sentence number in which that word occurs. You may assume that the input\n\r"
    "contains only spaces, newlines, standard English letters, and standard English punctuation\n\r"
    "marks."
)


class ConfigError(ValueError):
    """Raised when a tokenizer configuration is inconsistent."""


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """
    Character classes and abbreviations driving the tokenizer.

    Defaults come from the module constants above. Build from user data with
    ``TokenizerConfig.from_mapping``, which only accepts RECOGNIZED_OPTIONS.
    """
    sentence_separators: str = SENTENCE_SEPARATORS
    word_separators: str = WORD_SEPARATORS
    trim_chars: str = TRIM_CHARS
    abbreviations: tuple[str, ...] = ABBREVIATIONS
    abbreviation_mark: str = ABBREVIATION_MARK
    mask_char: str = MASK_CHAR

    def __post_init__(self) -> None:
        if not self.sentence_separators:
            raise ConfigError("sentence_separators must not be empty")
        if len(self.abbreviation_mark) != 1 or len(self.mask_char) != 1:
            raise ConfigError("abbreviation_mark and mask_char must be single characters")
        if self.abbreviation_mark not in self.sentence_separators:
            raise ConfigError(f"abbreviation mark {self.abbreviation_mark!r} is not a sentence separator")
        if self.mask_char in self.sentence_separators or self.mask_char in self.word_separators:
            raise ConfigError(f"mask char {self.mask_char!r} collides with a separator")
        for abbr in self.abbreviations:
            if self.abbreviation_mark not in abbr:
                raise ConfigError(
                    f"abbreviation {abbr!r} does not contain {self.abbreviation_mark!r}"
                )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "TokenizerConfig":
        unknown = sorted(set(options) - set(RECOGNIZED_OPTIONS))
        if unknown:
            raise ConfigError(f"unknown configuration option(s): {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for name in ("sentence_separators", "word_separators", "trim_chars"):
            if name in options:
                value = options[name]
                if isinstance(value, (list, tuple)):
                    value = "".join(value)
                if not isinstance(value, str):
                    raise ConfigError(f"{name} must be a string or a list of characters")
                kwargs[name] = value

        if "abbreviations" in options:
            abbrs = options["abbreviations"]
            if not isinstance(abbrs, (list, tuple)) or not all(isinstance(a, str) for a in abbrs):
                raise ConfigError("abbreviations must be a list of strings")
            kwargs["abbreviations"] = tuple(abbrs)

        return cls(**kwargs)


DEFAULT_CONFIG = TokenizerConfig()
