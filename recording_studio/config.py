"""
Настройки приложения студии.

Значения читаются из переменных окружения с префиксом STUDIO_.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class StudioSettings(BaseModel):
    """Настройки логирования и инфраструктуры."""

    log_level: LogLevel = "INFO"
    log_context: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StudioSettings":
        """Создает настройки из переменных окружения."""
        env = os.environ if environ is None else environ
        values = {}
        if "STUDIO_LOG_LEVEL" in env:
            values["log_level"] = env["STUDIO_LOG_LEVEL"].upper()
        if "STUDIO_LOG_CONTEXT" in env:
            values["log_context"] = env["STUDIO_LOG_CONTEXT"].lower() == "true"
        return cls(**values)
