"""Count chars, words, or lines in UTF-8 text. See `count`."""

from wordcount.processor import CountError, CountOption, DecodingError, count

__all__ = ["count", "CountOption", "CountError", "DecodingError"]
