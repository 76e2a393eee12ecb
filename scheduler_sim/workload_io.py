from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from .models import Process

logger = logging.getLogger(__name__)

# Column order of headerless CSV rows: id, burst, arrival[, priority].
HEADERLESS_COLUMNS = ("pid", "burst_time", "arrival_time", "priority")


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.debug("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, Iterable) or isinstance(raw, (str, dict)):
        raise ValueError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8", newline="") as f:
        rows = [row for row in csv.reader(f) if row and any(cell.strip() for cell in row)]

    if not rows:
        return []

    if _is_int(rows[0][0]):
        return [_process_from_row(row) for row in rows]

    header = [cell.strip() for cell in rows[0]]
    return [_process_from_mapping(dict(zip(header, row))) for row in rows[1:]]


def _is_int(value: str) -> bool:
    try:
        int(value.strip())
    except ValueError:
        return False
    return True


def _process_from_row(row: Sequence[str]) -> Process:
    if len(row) not in (3, 4):
        raise ValueError(f"Invalid process row (expected id, burst, arrival[, priority]): {row!r}")
    return _process_from_mapping(dict(zip(HEADERLESS_COLUMNS, row)))


def _process_from_mapping(mapping) -> Process:
    try:
        pid = int(mapping["pid"])
        arrival_time = int(mapping["arrival_time"])
        burst_time = int(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    priority_val = mapping.get("priority")
    if isinstance(priority_val, str):
        priority_val = priority_val.strip()
    try:
        priority = int(priority_val) if priority_val not in (None, "") else 0
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid priority in process entry: {mapping!r}") from exc

    return Process(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )
