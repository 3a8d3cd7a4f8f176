from typing import Any, Dict, List

# Channels a dataset can be loaded into
SAMPLE_CHANNEL = "sample"
CSV_CHANNEL = "csv"
REMOTE_CHANNEL = "mongo"
CHANNELS: List[str] = [SAMPLE_CHANNEL, CSV_CHANNEL, REMOTE_CHANNEL]

SCHOOL_TYPES: List[str] = ["College", "High School"]
DEFAULT_SCHOOL_TYPE = "High School"

# Positional columns of an imported CSV (the header row is skipped, never read).
# majorInterest is optional and only picked up from a 15th column.
CSV_COLUMNS: List[str] = [
    "name",
    "age",
    "city",
    "state",
    "schoolName",
    "schoolType",
    "schoolState",
    "schoolCity",
    "cumulativeGpa",
    "unweightedGpa",
    "weightedGpa",
    "rigorCoursesCount",
    "creditsEarned",
    "graduationYear",
    "majorInterest",
]

STRING_FIELDS: List[str] = ["city", "state", "schoolName", "schoolState", "schoolCity"]
COUNT_FIELDS: List[str] = ["rigorCoursesCount", "creditsEarned"]
FLOAT_FIELDS: List[str] = ["cumulativeGpa", "unweightedGpa", "weightedGpa"]

# Fallbacks used when a field is blank or cannot be parsed
FIELD_DEFAULTS: Dict[str, Any] = {
    "name": "Unknown",
    "age": 0,
    "city": "",
    "state": "",
    "schoolName": "",
    "schoolType": DEFAULT_SCHOOL_TYPE,
    "schoolState": "",
    "schoolCity": "",
    "cumulativeGpa": 0.0,
    "unweightedGpa": 0.0,
    "weightedGpa": 0.0,
    "rigorCoursesCount": 0,
    "creditsEarned": 0,
    "graduationYear": 2024,
}

# Every key a normalized record carries (majorInterest is optional)
RECORD_FIELDS: List[str] = ["id"] + list(FIELD_DEFAULTS.keys())
