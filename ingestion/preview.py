from typing import Any, Dict, List

import pandas as pd

from .schemas import RECORD_FIELDS, SCHOOL_TYPES

SEARCH_COLUMNS = ["name", "schoolName", "city"]


def only_dicts(records: List[Any]) -> List[Dict[str, Any]]:
    # Remote payloads are not shape-checked on ingestion
    return [r for r in records if isinstance(r, dict)]


def records_to_df(records: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame.from_records(only_dicts(records))
    # Remote datasets are trusted as-is, so make sure the preview columns exist
    for col in RECORD_FIELDS:
        if col not in df.columns:
            df[col] = pd.NA
    return df


def search_records(records: List[Dict[str, Any]], term: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring match on name, school name or city."""
    term = (term or "").strip().lower()
    if not term or not records:
        return list(records)
    records = only_dicts(records)
    if not records:
        return []
    df = records_to_df(records)
    mask = pd.Series(False, index=df.index)
    for col in SEARCH_COLUMNS:
        mask = mask | df[col].astype("string").str.lower().str.contains(term, regex=False, na=False)
    return [records[i] for i in df.index[mask.to_numpy(dtype=bool)]]


def dataset_stats(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    stats: Dict[str, Any] = {
        "count": len(records),
        "average_gpa": 0.0,
        "total_credits": 0,
        "school_types": {t: 0 for t in SCHOOL_TYPES},
    }
    if not only_dicts(records):
        return stats
    df = records_to_df(records)
    gpa = pd.to_numeric(df["cumulativeGpa"], errors="coerce").fillna(0)
    credits = pd.to_numeric(df["creditsEarned"], errors="coerce").fillna(0)
    stats["average_gpa"] = round(float(gpa.mean()), 2)
    stats["total_credits"] = int(credits.sum())
    counts = df["schoolType"].astype("string").value_counts()
    for school_type, n in counts.items():
        stats["school_types"][str(school_type)] = int(n)
    return stats
