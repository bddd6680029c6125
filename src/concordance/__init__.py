"""
Concordance Module

Builds a word concordance from an English text: for every distinct word it
records how many times it occurs and the zero-based indices of the sentences
it occurs in, then reports the words in alphabetical order.

The module is split along the same lines as the pipeline:
- Configuration of separators, trim characters and abbreviations
- Tokenization (sentences, words, token cleaning)
- Accumulation and rendering (ConcordanceIndex)
- Orchestration (Engine) for the CLI and the web frontend

Main Functions:
    build_concordance(text): tokenize a text and return its ConcordanceIndex

Example Usage:
    from concordance import build_concordance

    index = build_concordance("cat sat. the cat ran. cat cat.")
    for line in index.render():
        print(line)          # cat\t{4:0,1,2,2} ...
"""

# src/concordance/__init__.py
from .config import ConfigError, TokenizerConfig
from .engine import Engine, build_concordance
from .index import ConcordanceIndex
from .models import ConcordanceRow, Occurrence, WordEntry
from .tokenizer import Tokenizer

__version__ = "1.0.0"
__all__ = [
    "ConfigError",
    "ConcordanceIndex",
    "ConcordanceRow",
    "Engine",
    "Occurrence",
    "Tokenizer",
    "TokenizerConfig",
    "WordEntry",
    "build_concordance",
]
