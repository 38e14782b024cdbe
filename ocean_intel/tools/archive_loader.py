"""
Archive and Reference Dataset Loader

Reads the on-disk datasets the engine is fed with and normalizes them into
plain records:

- Historical buoy archive (NDBC standard meteorological CSV) → observation rows
- Regional stock assessment CSV → StockRecord dicts
- Species constraints JSON → SpeciesRecord dicts

File reading uses pandas; normalization functions take already-parsed rows
so they can be exercised without touching the filesystem.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from ocean_intel.constants.parameters import (
    ARCHIVE_PARAMETERS,
    NDBC_MISSING_SENTINELS,
    NDBC_YEAR_COLUMNS,
    TIMESTAMP_KEY,
)
from ocean_intel.core.errors import NotFoundError, ValidationError
from ocean_intel.core.records import to_number
from ocean_intel.schemas.fisheries import SpeciesRecord
from ocean_intel.schemas.risk import StockRecord
from ocean_intel.tools.time_tool import ndbc_datetime, parse_iso_datetime

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ============================================================================
# Archive Observations
# ============================================================================

def archive_value(value: Any) -> Optional[float]:
    """
    Convert an NDBC cell to float, mapping sentinels (99, 999, 9999) to None.

    Example:
        >>> archive_value("999.0") is None
        True
        >>> archive_value("14.2")
        14.2
    """
    number = to_number(value)
    if number is None or number in NDBC_MISSING_SENTINELS:
        return None
    return number


def _row_timestamp(row: Mapping[str, Any]):
    if row.get(TIMESTAMP_KEY) not in (None, ""):
        return parse_iso_datetime(row[TIMESTAMP_KEY])

    year = next((row[c] for c in NDBC_YEAR_COLUMNS if row.get(c) not in (None, "")), None)
    return ndbc_datetime(year, row.get("MM"), row.get("DD"), row.get("hh"), row.get("mm"))


def normalize_archive_rows(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Normalize raw archive rows into observation records.

    Args:
        rows: Raw CSV rows with NDBC columns (#YY/YY/YYYY, MM, DD, hh, mm,
              WTMP, WSPD, WVHT, PRES) or an ISO "timestamp" column

    Returns:
        [{"timestamp": datetime, "year": int, "WTMP": float|None, ...}, ...]
        sorted by timestamp; rows without a usable date are dropped
    """
    records = []
    dropped = 0

    for row in rows:
        stamp = _row_timestamp(row)
        if stamp is None:
            dropped += 1
            continue

        record = {TIMESTAMP_KEY: stamp, "year": stamp.year}
        for key in ARCHIVE_PARAMETERS:
            record[key] = archive_value(row.get(key))
        records.append(record)

    if dropped:
        logger.warning(f"Dropped {dropped} archive row(s) without a usable timestamp")

    # Stable sort keeps duplicate timestamps in file order
    records.sort(key=lambda r: r[TIMESTAMP_KEY])
    return records


def filter_year(series: Sequence[Mapping[str, Any]], year: int, max_rows: Optional[int] = None) -> List[Mapping[str, Any]]:
    """
    Rows of one year, keeping only the most recent max_rows.

    Args:
        series: Normalized archive rows
        year: Calendar year
        max_rows: Optional cap on returned rows

    Returns:
        List of rows in original order
    """
    rows = [r for r in series if r.get("year") == year]
    if max_rows is not None and len(rows) > max_rows:
        rows = rows[len(rows) - max_rows:]
    return rows


def _read_csv_rows(path: PathLike, what: str) -> List[Dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        raise NotFoundError(f"{what} file not found", details={"path": str(path)})

    frame = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    # NDBC exports carry a units row ("#yr mo dy ...") right under the header
    if len(frame) and str(frame.iloc[0, 0]).startswith("#"):
        frame = frame.iloc[1:]

    logger.info(f"Read {len(frame)} rows from {path.name}")
    return frame.to_dict(orient="records")


def load_archive(path: PathLike) -> List[Dict[str, Any]]:
    """
    Load and normalize the historical buoy archive.

    Raises:
        NotFoundError: if the file does not exist
    """
    return normalize_archive_rows(_read_csv_rows(path, "Historical data"))


# ============================================================================
# Reference Datasets
# ============================================================================

def _validation_error(e: PydanticValidationError, index: int) -> ValidationError:
    first = e.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return ValidationError(
        f"Invalid field '{field}' in record {index}: {first.get('msg')}",
        details={"field": field, "record": index}
    )


def parse_stock_rows(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Convert raw stock CSV rows into StockRecord dicts.

    "protected" is true only for the text "true" (any case).

    Raises:
        ValidationError: naming the first invalid field
    """
    records = []
    for index, row in enumerate(rows):
        data = dict(row)
        if isinstance(data.get("protected"), str):
            data["protected"] = data["protected"].strip().lower() == "true"
        try:
            records.append(StockRecord.model_validate(data).model_dump())
        except PydanticValidationError as e:
            raise _validation_error(e, index)
    return records


def load_stock_records(path: PathLike) -> List[Dict[str, Any]]:
    """
    Load regional stock assessment records.

    Raises:
        NotFoundError: if the file does not exist
        ValidationError: if a row is malformed
    """
    return parse_stock_rows(_read_csv_rows(path, "Data"))


def parse_species(items: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Validate species reference entries.

    Raises:
        ValidationError: naming the first invalid field
    """
    species = []
    for index, item in enumerate(items):
        try:
            species.append(SpeciesRecord.model_validate(item).model_dump())
        except PydanticValidationError as e:
            raise _validation_error(e, index)
    return species


def load_species(path: PathLike) -> List[Dict[str, Any]]:
    """
    Load the species constraints dataset (JSON list).

    Raises:
        NotFoundError: if the file does not exist
        ValidationError: if an entry is malformed
    """
    path = Path(path)
    if not path.exists():
        raise NotFoundError("Species file not found", details={"path": str(path)})

    with path.open(encoding="utf-8") as fh:
        items = json.load(fh)

    return parse_species(items)
