import json

import pytest

from wordcount import CountOption
from wordcount.config import CONFIG_ENV, WordcountConfig, load_config


def test_defaults_when_unset(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    cfg = load_config()
    assert cfg == WordcountConfig()
    assert cfg.count_option() is CountOption.WORD


def test_reads_json(monkeypatch):
    monkeypatch.setenv(
        CONFIG_ENV,
        json.dumps({"mode": "chars", "top": 3, "format": "JSON", "log_level": "info"}),
    )
    cfg = load_config()
    assert cfg.count_option() is CountOption.CHAR
    assert cfg.top == 3
    assert cfg.output_format == "json"
    assert cfg.log_level == "INFO"


def test_malformed_json_falls_back_to_defaults(monkeypatch, caplog):
    monkeypatch.setenv(CONFIG_ENV, "{not json")
    with caplog.at_level("WARNING"):
        cfg = load_config()
    assert cfg == WordcountConfig()
    assert CONFIG_ENV in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"mode": "paragraphs"},
        {"format": "xml"},
        {"top": -1},
        {"top": "many"},
        {"top": None},
        {"top": [1]},
        {"top": {"n": 1}},
    ],
)
def test_bad_values_raise(monkeypatch, data):
    monkeypatch.setenv(CONFIG_ENV, json.dumps(data))
    with pytest.raises(ValueError):
        load_config()


def test_non_integer_top_message(monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, json.dumps({"top": None}))
    with pytest.raises(ValueError, match="top must be an integer, got None"):
        load_config()
