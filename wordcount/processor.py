import io
import logging
import re
from enum import Enum
from typing import Dict, Iterable, Optional, Union

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"\w+")

_OPTION_NAMES = {
    "char": "CHAR",
    "chars": "CHAR",
    "word": "WORD",
    "words": "WORD",
    "line": "LINE",
    "lines": "LINE",
}


class CountOption(Enum):
    """What `count` treats as a token."""

    CHAR = "char"
    WORD = "word"
    LINE = "line"

    @classmethod
    def default(cls) -> "CountOption":
        return cls.WORD

    @classmethod
    def from_name(cls, name: str) -> "CountOption":
        """
        Parse a mode name such as "words" or "Line".
        Singular and plural forms are accepted.
        """
        key = (name or "").strip().lower()
        if key not in _OPTION_NAMES:
            raise ValueError(
                f"Unsupported mode: {name!r}. Choose from chars|words|lines."
            )
        return cls[_OPTION_NAMES[key]]


class CountError(ValueError):
    """Base class for counting failures."""


class DecodingError(CountError):
    """
    A line of input is not valid UTF-8.

    `line_number` is the 1-based line that failed when the input yields
    bytes. A text stream decodes ahead in chunks, so the failing line is
    unknown there and `line_number` is None.
    """

    def __init__(self, line_number: Optional[int], reason: str):
        if line_number is None:
            message = f"input is not valid UTF-8: {reason}"
        else:
            message = f"line {line_number} is not valid UTF-8: {reason}"
        super().__init__(message)
        self.line_number = line_number


def _strip_terminator(line: str) -> str:
    # Only "\n" and "\r\n" end a line; a lone "\r" is content.
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _iter_lines(source: Iterable[Union[str, bytes]]) -> Iterable[str]:
    """Yield decoded lines without terminators, failing on invalid UTF-8."""
    line_number = 0
    lines = iter(source)
    while True:
        line_number += 1
        try:
            raw = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise DecodingError(None, exc.reason) from exc

        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodingError(line_number, exc.reason) from exc

        yield _strip_terminator(raw)


def count(
    source: Union[str, bytes, Iterable[Union[str, bytes]]],
    option: CountOption = CountOption.WORD,
) -> Dict[str, int]:
    """
    Count chars, words or lines read from `source`.

    `source` is anything that yields lines: an open text or binary stream,
    or a list of str/bytes lines. A bare str or bytes value is read as an
    in-memory buffer. Bytes are decoded as strict UTF-8.

    * CountOption.CHAR: every Unicode code point
    * CountOption.WORD: every match of the regex "\\w+"
    * CountOption.LINE: every line, split on "\\n" or "\\r\\n"

    Raises DecodingError if any line is not valid UTF-8; nothing is
    returned in that case. The error names the failing line only for
    bytes input; see DecodingError.

    >>> count("aa bb cc bb", CountOption.WORD)
    {'aa': 1, 'bb': 2, 'cc': 1}
    """
    if not isinstance(option, CountOption):
        raise TypeError(f"option must be a CountOption, got {option!r}")

    if isinstance(source, str):
        source = io.StringIO(source)
    elif isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    freqs: Dict[str, int] = {}
    lines_read = 0

    for line in _iter_lines(source):
        lines_read += 1
        if option is CountOption.CHAR:
            for c in line:
                freqs[c] = freqs.get(c, 0) + 1
        elif option is CountOption.WORD:
            for m in WORD_RE.finditer(line):
                word = m.group(0)
                freqs[word] = freqs.get(word, 0) + 1
        else:
            freqs[line] = freqs.get(line, 0) + 1

    logger.debug(
        "counted %d distinct %s tokens over %d lines",
        len(freqs),
        option.value,
        lines_read,
    )
    return freqs


__all__ = ["CountOption", "CountError", "DecodingError", "count"]
