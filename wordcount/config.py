import json
import logging
import os
from dataclasses import dataclass

from wordcount.processor import CountOption

logger = logging.getLogger(__name__)

CONFIG_ENV = "WORDCOUNT_CONFIG_JSON"
OUTPUT_FORMATS = ("text", "json")


@dataclass
class WordcountConfig:
    mode: str = "words"  # chars | words | lines
    top: int = 0  # 0 = print every row
    output_format: str = "text"  # text | json
    log_level: str = "WARNING"

    def count_option(self) -> CountOption:
        return CountOption.from_name(self.mode)


def _safe_json_load(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring %s: %s", CONFIG_ENV, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", CONFIG_ENV)
        return {}
    return data


def load_config() -> WordcountConfig:
    """
    Build the CLI defaults from $WORDCOUNT_CONFIG_JSON.
    Unset or empty means built-in defaults. Keys: mode, top, format, log_level.
    """
    raw = (os.getenv(CONFIG_ENV) or "").strip()
    if not raw:
        return WordcountConfig()

    data = _safe_json_load(raw)

    mode = str(data.get("mode") or "words").strip()
    CountOption.from_name(mode)

    output_format = str(data.get("format") or "text").strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported format: {output_format!r}. Choose from text|json."
        )

    raw_top = data.get("top", 0)
    try:
        top = int(raw_top)
    except (TypeError, ValueError):
        raise ValueError(f"top must be an integer, got {raw_top!r}") from None
    if top < 0:
        raise ValueError(f"top must be >= 0, got {top}")

    return WordcountConfig(
        mode=mode,
        top=top,
        output_format=output_format,
        log_level=str(data.get("log_level") or "WARNING").strip().upper(),
    )
