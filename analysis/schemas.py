from enum import Enum
from typing import Any, Dict, List, Optional


class ChartType(str, Enum):
    BAR = "BAR"
    LINE = "LINE"
    PIE = "PIE"
    SCATTER = "SCATTER"
    NONE = "NONE"


# JSON schema handed to the model so its answer can be parsed directly
RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "answer": {"type": "STRING", "description": "Direct text answer to the user query"},
        "calculationSummary": {"type": "STRING", "description": "Details of any math performed"},
        "visualization": {
            "type": "OBJECT",
            "properties": {
                "type": {"type": "STRING", "enum": [c.value for c in ChartType], "description": "Type of chart"},
                "data": {
                    "type": "ARRAY",
                    "items": {
                        "type": "OBJECT",
                        "properties": {
                            "label": {"type": "STRING"},
                            "value": {"type": "NUMBER"},
                        },
                        "required": ["label", "value"],
                    },
                    "description": "Array of objects for charting",
                },
                "xAxisLabel": {"type": "STRING"},
                "yAxisLabel": {"type": "STRING"},
                "title": {"type": "STRING"},
            },
            "required": ["type", "data", "xAxisLabel", "yAxisLabel", "title"],
        },
    },
    "required": ["answer"],
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def coerce_chart_points(items: Any) -> List[Dict[str, Any]]:
    points: List[Dict[str, Any]] = []
    if not isinstance(items, list):
        return points
    for item in items:
        if not isinstance(item, dict):
            continue
        value = _as_number(item.get("value"))
        if value is None:
            continue
        points.append({"label": _as_text(item.get("label")), "value": value})
    return points


def coerce_visualization(raw: Any) -> Optional[Dict[str, Any]]:
    """Return a chart spec that can be rendered, or None when nothing should be drawn."""
    if not isinstance(raw, dict):
        return None
    try:
        chart_type = ChartType(str(raw.get("type", "")).upper())
    except ValueError:
        return None
    if chart_type == ChartType.NONE:
        return None
    return {
        "type": chart_type.value,
        "data": coerce_chart_points(raw.get("data")),
        "xAxisLabel": _as_text(raw.get("xAxisLabel")),
        "yAxisLabel": _as_text(raw.get("yAxisLabel")),
        "title": _as_text(raw.get("title")),
    }


def coerce_analysis_response(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError("Analysis response must be a JSON object")
    result: Dict[str, Any] = {"answer": _as_text(raw.get("answer"))}
    if raw.get("calculationSummary"):
        result["calculationSummary"] = _as_text(raw.get("calculationSummary"))
    visualization = coerce_visualization(raw.get("visualization"))
    if visualization is not None:
        result["visualization"] = visualization
    return result
