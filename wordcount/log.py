import logging
import sys

LEVEL_PREFIXES = {
    logging.DEBUG: "[DEBUG] ",
    logging.INFO: "",
    logging.WARNING: "[WARNING] ",
}


class PrefixFormatter(logging.Formatter):
    """Plain messages for INFO, a bracketed level name for everything else."""

    def format(self, record):
        message = super().format(record)
        prefix = LEVEL_PREFIXES.get(record.levelno, "[ERROR] ")
        return prefix + message


def setup_logger(name: str = "wordcount", level: str = "WARNING") -> logging.Logger:
    """
    Point `name` at stderr, replacing any handler from an earlier call.
    Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(PrefixFormatter("%(message)s"))
    logger.handlers = [handler]
    return logger
