from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .errors import format_position

_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_FORMAT)
    return logger


class WarningKind(str, Enum):
    MISSING_FONT = "missing-font"
    UNKNOWN_CHARSET = "unknown-charset"
    UNMAPPED_CHARSET = "unmapped-charset"
    UNRESOLVED_REFERENCE = "unresolved-reference"
    TYPE_MISMATCH = "type-mismatch"
    UNRECOGNIZED_VALUE = "unrecognized-value"


@dataclass(frozen=True)
class DecodeWarning:
    kind: WarningKind
    message: str
    position: int | None = None

    def describe(self) -> str:
        return f"[{self.kind.value}] {self.message} at {format_position(self.position)}"


@dataclass
class WarningLog:
    """
    Per-document collector for recoverable decode problems.

    Every recorded warning is also emitted on the ``cdxdecode`` logger.
    """

    logger_name: str = "cdxdecode"
    _warnings: List[DecodeWarning] = field(default_factory=list, init=False, repr=False)

    def record(self, kind: WarningKind, message: str, position: int | None = None) -> DecodeWarning:
        warning = DecodeWarning(kind=kind, message=message, position=position)
        self._warnings.append(warning)
        get_logger(self.logger_name).warning(warning.describe())
        return warning

    @property
    def warnings(self) -> List[DecodeWarning]:
        return list(self._warnings)

    def kinds(self) -> List[WarningKind]:
        return [w.kind for w in self._warnings]

    def __len__(self) -> int:
        return len(self._warnings)

    def flush(self, destination: Path) -> None:
        if not self._warnings:
            return
        destination.parent.mkdir(parents=True, exist_ok=True)
        lines = [f"#{idx:04d} {w.describe()}" for idx, w in enumerate(self._warnings, start=1)]
        destination.write_text("\n".join(lines) + "\n", encoding="utf-8")
