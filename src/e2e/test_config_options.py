import json
from pathlib import Path

import pytest

from concordance import build_concordance
from concordance.config import ABBREVIATIONS, ConfigError, TokenizerConfig
from concordance.loader import load_config


def test_defaults():
    cfg = TokenizerConfig()
    assert cfg.sentence_separators == ".!?;"
    assert cfg.word_separators == " \r\n"
    assert cfg.abbreviations == ABBREVIATIONS
    assert cfg.mask_char == "|"


def test_from_mapping_accepts_recognized_options():
    cfg = TokenizerConfig.from_mapping({
        "sentence_separators": [".", "!"],
        "word_separators": " \n",
        "trim_chars": ",",
        "abbreviations": ["Mr.", "a.m."],
    })
    assert cfg.sentence_separators == ".!"
    assert cfg.word_separators == " \n"
    assert cfg.trim_chars == ","
    assert cfg.abbreviations == ("Mr.", "a.m.")


@pytest.mark.parametrize("options", [
    {"colour": "blue"},
    {"abbreviations": ["Mr"]},
    {"abbreviations": "e.g."},
    {"trim_chars": 5},
    {"sentence_separators": ""},
    {"sentence_separators": "!?"},
    {"word_separators": " |"},
])
def test_invalid_options_raise(options):
    with pytest.raises(ConfigError):
        TokenizerConfig.from_mapping(options)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_custom_abbreviation_keeps_sentence_together():
    cfg = TokenizerConfig.from_mapping({"abbreviations": ["Dr."]})
    idx = build_concordance("Dr. Who lives. Here.", cfg)
    assert idx.get("dr").sentence_indices == [0]
    assert idx.get("who").sentence_indices == [0]
    assert idx.get("here").sentence_indices == [1]


def test_load_config_from_json(tmp_path: Path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"abbreviations": ["etc."]}), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.abbreviations == ("etc.",)


def test_load_config_rejects_bad_json(tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(bad))
    arr = tmp_path / "arr.json"
    arr.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(arr))
