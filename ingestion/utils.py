import math
import re
from typing import Any, Dict, List, Optional

from .schemas import (
    CSV_COLUMNS,
    DEFAULT_SCHOOL_TYPE,
    FIELD_DEFAULTS,
    FLOAT_FIELDS,
    COUNT_FIELDS,
    SCHOOL_TYPES,
    STRING_FIELDS,
)

_INT_PREFIX = re.compile(r"^[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def clean_string(value: Optional[str]) -> str:
    # Quotes are removed anywhere in the field, not just at the edges
    if value is None:
        return ""
    return value.replace('"', "").strip()


def parse_int_safe(value: Any, default: int = 0) -> int:
    """Read the leading integer of ``value``.

    Mirrors a lenient parseInt: ``"17 yrs"`` gives 17 and ``"3.9"`` gives 3.
    Zero, negative or unparsable input falls back to ``default``.
    """
    if value in (None, ""):
        return default
    m = _INT_PREFIX.match(clean_string(str(value)))
    if not m:
        return default
    try:
        number = int(m.group(0))
    except ValueError:
        # digit run too long to convert
        return default
    if number <= 0:
        return default
    return number


def parse_float_safe(value: Any, default: float = 0.0) -> float:
    if value in (None, ""):
        return default
    m = _FLOAT_PREFIX.match(clean_string(str(value)))
    if not m:
        return default
    number = float(m.group(0))
    if not math.isfinite(number) or number <= 0:
        return default
    return number


def normalize_school_type(value: Optional[str]) -> str:
    s = clean_string(value).lower()
    for school_type in SCHOOL_TYPES:
        if s == school_type.lower():
            return school_type
    return DEFAULT_SCHOOL_TYPE


def preprocess_row(values: List[str], position: int) -> Dict[str, Any]:
    """Map one split CSV line onto a student record.

    ``position`` is the 1-based index among non-blank data rows and becomes
    the synthesized id; ids are never read from the file.
    """
    raw = dict(zip(CSV_COLUMNS, values))
    record: Dict[str, Any] = {"id": f"csv-{position}"}
    record["name"] = clean_string(raw.get("name")) or FIELD_DEFAULTS["name"]
    record["age"] = parse_int_safe(raw.get("age"), FIELD_DEFAULTS["age"])
    for field in STRING_FIELDS:
        record[field] = clean_string(raw.get(field))
    record["schoolType"] = normalize_school_type(raw.get("schoolType"))
    for field in FLOAT_FIELDS:
        record[field] = parse_float_safe(raw.get(field), FIELD_DEFAULTS[field])
    for field in COUNT_FIELDS:
        record[field] = parse_int_safe(raw.get(field), FIELD_DEFAULTS[field])
    record["graduationYear"] = parse_int_safe(raw.get("graduationYear"), FIELD_DEFAULTS["graduationYear"])
    major = clean_string(raw.get("majorInterest"))
    if major:
        record["majorInterest"] = major
    return record


def parse_csv_text(text: str) -> List[Dict[str, Any]]:
    """Turn CSV text into normalized student records.

    The first line is treated as a header and dropped. Fields are split on
    every comma: quoted fields that contain commas are not supported.
    """
    lines = text.split("\n")
    rows = [line for line in lines[1:] if line.strip()]
    return [preprocess_row(line.split(","), idx + 1) for idx, line in enumerate(rows)]


def read_upload_text(file_storage) -> str:
    # file_storage is werkzeug FileStorage
    file_storage.stream.seek(0)
    return file_storage.stream.read().decode("utf-8", errors="ignore")
