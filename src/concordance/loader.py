from __future__ import annotations
import json
import os
import sys
from typing import Optional

from .config import ConfigError, TokenizerConfig


def read_text(source: Optional[str] = None) -> str:
    """
    Return the whole input text.
    source: a file path, or None / "-" for stdin.
    """
    if source is None or source == "-":
        return sys.stdin.read()
    if not os.path.exists(source):
        raise FileNotFoundError(source)
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def load_config(path: str) -> TokenizerConfig:
    """Read a JSON object of tokenizer options and build a TokenizerConfig."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object of options")
    return TokenizerConfig.from_mapping(data)
