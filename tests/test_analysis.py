import json

from analysis.schemas import ChartType, coerce_analysis_response, coerce_visualization
from analysis.service import APOLOGY_ANSWER, analyze_data, build_contents
from conftest import FakeAnalysisClient

CHART = {
    "type": "BAR",
    "data": [{"label": "College", "value": 3.6}, {"label": "High School", "value": "3.4"}],
    "xAxisLabel": "School type",
    "yAxisLabel": "GPA",
    "title": "Average GPA",
}


def test_full_response_is_kept():
    result = coerce_analysis_response({"answer": "3.5", "calculationSummary": "mean of 8", "visualization": CHART})
    assert result["answer"] == "3.5"
    assert result["calculationSummary"] == "mean of 8"
    assert result["visualization"]["type"] == "BAR"
    assert result["visualization"]["data"][1] == {"label": "High School", "value": 3.4}


def test_none_and_unknown_chart_types_are_dropped():
    assert coerce_visualization(dict(CHART, type="NONE")) is None
    assert coerce_visualization(dict(CHART, type="HEATMAP")) is None
    assert coerce_visualization("BAR") is None
    assert coerce_visualization(dict(CHART, type="pie"))["type"] == ChartType.PIE.value


def test_points_without_numeric_value_are_dropped():
    chart = dict(CHART, data=[{"label": "a", "value": "n/a"}, {"label": "b"}, "junk", {"label": 5, "value": 2}])
    assert coerce_visualization(chart)["data"] == [{"label": "5", "value": 2.0}]


def test_missing_answer_becomes_empty_string():
    assert coerce_analysis_response({}) == {"answer": ""}


def test_analyze_data_sends_dataset_and_query():
    client = FakeAnalysisClient(result={"answer": "two students"})
    records = [{"id": "csv-1", "name": "Ada"}]
    assert analyze_data("how many?", records, client=client) == {"answer": "two students"}
    contents = client.contents[0]
    assert contents == build_contents("how many?", records)
    assert json.dumps(records) in contents[0]
    assert contents[1] == "User Query: how many?"


def test_client_failure_returns_apology():
    client = FakeAnalysisClient(exc=RuntimeError("quota"))
    assert analyze_data("q", [], client=client) == {"answer": APOLOGY_ANSWER}


def test_non_object_response_returns_apology():
    client = FakeAnalysisClient(result=["not", "an", "object"])
    assert analyze_data("q", [], client=client) == {"answer": APOLOGY_ANSWER}


def test_missing_api_key_returns_apology(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    assert analyze_data("q", [])["answer"] == APOLOGY_ANSWER
