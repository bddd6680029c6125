# concordance/engine.py
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .config import TokenizerConfig
from .index import ConcordanceIndex
from .loader import read_text
from .tokenizer import Tokenizer

log = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> bool:
    """Turn on INFO logging for --verbose or CONCORDANCE_VERBOSE=1; returns whether it did."""
    if verbose or os.environ.get("CONCORDANCE_VERBOSE") == "1":
        logging.basicConfig(level=logging.INFO, stream=sys.stderr)
        return True
    return False


class Engine:
    """
    Thin orchestration layer that glues together:
      - the Tokenizer (text -> ordered (sentence_index, word) occurrences),
      - the ConcordanceIndex (accumulation + sorted report).

    Public API (used by CLI/Flask):
      * build(text):           tokenize one text into a fresh index
      * build_from_path(path): same, reading a UTF-8 file (or stdin for "-")

    Engines hold no per-run state; each build returns a new index.
    """

    def __init__(self, config: Optional[TokenizerConfig] = None) -> None:
        self.tokenizer = Tokenizer(config)

    @property
    def config(self) -> TokenizerConfig:
        return self.tokenizer.config

    # /* ~~~ Tokenize a text and accumulate every occurrence ~~~ */
    def build(self, text: str) -> ConcordanceIndex:
        index = ConcordanceIndex()
        recorded = index.record_all(self.tokenizer.occurrences(text))
        log.info("Concordance built: words=%d distinct=%d", recorded, len(index))
        return index

    def build_from_path(self, path: Optional[str]) -> ConcordanceIndex:
        log.info("Reading input from %s", path or "stdin")
        return self.build(read_text(path))


def build_concordance(text: str, config: Optional[TokenizerConfig] = None) -> ConcordanceIndex:
    """Convenience: one-shot build with an ad-hoc Engine."""
    return Engine(config).build(text)
