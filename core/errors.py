"""Errors that abort a run. Everything else is reported as a diagnostic."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class DataLoadError(ValueError):
    """An input document could not be read or does not match its schema."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
