import json

import pytest

from app import app as flask_app

HEADER = "name,age,city,state,schoolName,schoolType,schoolState,schoolCity,cumulativeGpa,unweightedGpa,weightedGpa,rigorCoursesCount,creditsEarned,graduationYear"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class RecordingTransport:
    """Stands in for requests.request and remembers every call."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse(200, [])
        self.exc = exc
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


class FakeAnalysisClient:
    def __init__(self, result=None, exc=None):
        self.result = result if result is not None else {"answer": "ok"}
        self.exc = exc
        self.contents = []

    def generate_json(self, contents):
        self.contents.append(contents)
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def csv_header():
    return HEADER


@pytest.fixture
def transport(monkeypatch):
    t = RecordingTransport()
    monkeypatch.setattr("ingestion.remote.requests.request", t)
    return t


@pytest.fixture
def analysis_client():
    return FakeAnalysisClient()


@pytest.fixture
def client(analysis_client):
    flask_app.config["TESTING"] = True
    flask_app.config["ANALYSIS_CLIENT"] = analysis_client
    with flask_app.test_client() as c:
        yield c
    flask_app.config["ANALYSIS_CLIENT"] = None
