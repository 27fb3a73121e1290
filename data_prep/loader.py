from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from core.errors import DataLoadError
from core.schema import MonthlyCatalog, MonthlySnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise DataLoadError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(path, f"not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(path, f"invalid JSON ({exc})") from exc


def _load_records(path: Union[str, Path], record_type: Type[T]) -> List[T]:
    raw = _read_json(path)
    try:
        records = TypeAdapter(List[record_type]).validate_python(raw)
    except ValidationError as exc:
        raise DataLoadError(path, f"schema violation: {exc}") from exc
    logger.info("Loaded %d %s records from %s", len(records), record_type.__name__, path)
    return records


def load_snapshots(path: Union[str, Path]) -> List[MonthlySnapshot]:
    """
    Load the monthly account snapshots. Order is preserved as-is; callers
    must supply it sorted ascending by date.
    """
    return _load_records(path, MonthlySnapshot)


def load_catalogs(path: Union[str, Path]) -> List[MonthlyCatalog]:
    """Load the monthly product catalogs."""
    return _load_records(path, MonthlyCatalog)
