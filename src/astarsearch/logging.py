from __future__ import annotations

import json as _json
import logging
import sys
from typing import TextIO


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(data, ensure_ascii=False)


class ConsoleHandler(logging.StreamHandler):
    """Writes to ``sys.stdout`` or ``sys.stderr`` as they are at emit time."""

    def __init__(self, target: str = "stdout") -> None:
        if target not in ("stdout", "stderr"):
            raise ValueError(f"target must be 'stdout' or 'stderr', got {target!r}")
        self.target = target
        super().__init__()

    @property
    def stream(self) -> TextIO:
        return getattr(sys, self.target)

    @stream.setter
    def stream(self, _value: TextIO) -> None:
        pass


def get_logger(
    name: str = "astarsearch",
    level: int = logging.INFO,
    json: bool = False,
    stream: TextIO | str | None = None,
) -> logging.Logger:
    """``stream`` is a file object, or ``"stdout"``/``"stderr"`` (the default is stdout)."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    if stream is None or isinstance(stream, str):
        handler: logging.Handler = ConsoleHandler(stream or "stdout")
    else:
        handler = logging.StreamHandler(stream)
    if json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)
    return logger
