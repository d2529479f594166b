import json
import sys
from typing import Any, Dict

from ..application import interfaces as ports

LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, level: str = "INFO", show_context: bool = True):
        self._threshold = LEVELS[level.upper()]
        self._show_context = show_context

    def debug(self, message: str, **kwargs: Any) -> None:
        self._write("DEBUG", message, kwargs, sys.stdout)

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, kwargs, sys.stdout)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, kwargs, sys.stderr)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, kwargs, sys.stderr)

    def _write(self, level: str, message: str, context: Dict[str, Any], stream) -> None:
        if LEVELS[level] < self._threshold:
            return
        print(f"[{level}] {message}", file=stream, flush=True)
        if context and self._show_context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )
