from ingestion.preview import dataset_stats, search_records
from ingestion.samples import DEMO_CSV_DATA, SAMPLE_DATA


def test_search_matches_name_school_and_city():
    assert [r["id"] for r in search_records(SAMPLE_DATA, "ava")] == ["s-1"]
    assert [r["id"] for r in search_records(SAMPLE_DATA, "UNIVERSITY")] == ["s-3", "s-5", "s-7"]
    assert [r["id"] for r in search_records(SAMPLE_DATA, "seattle")] == ["s-4"]
    assert search_records(SAMPLE_DATA, "nobody") == []


def test_empty_search_returns_everything():
    assert search_records(SAMPLE_DATA, "") == SAMPLE_DATA
    assert search_records([], "ava") == []


def test_search_tolerates_untyped_remote_records():
    records = [{"id": 1, "name": None}, {"id": 2, "name": "Carl", "city": "Ithaca"}]
    assert search_records(records, "ith") == [records[1]]


def test_stats():
    stats = dataset_stats(DEMO_CSV_DATA)
    assert stats["count"] == 5
    assert stats["average_gpa"] == round((3.91 + 3.97 + 4.0 + 3.58 + 3.74) / 5, 2)
    assert stats["total_credits"] == 27 + 64 + 21 + 92 + 45
    assert stats["school_types"] == {"College": 3, "High School": 2}


def test_stats_for_empty_dataset():
    stats = dataset_stats([])
    assert stats["count"] == 0
    assert stats["average_gpa"] == 0.0
    assert stats["total_credits"] == 0


def test_non_dict_remote_items_are_skipped():
    records = [1, "two", {"id": "a", "name": "Ann", "cumulativeGpa": 3.0, "creditsEarned": 10}]
    stats = dataset_stats(records)
    assert stats["average_gpa"] == 3.0
    assert stats["total_credits"] == 10
    assert search_records(records, "ann") == [records[2]]
    assert dataset_stats([1, 2])["average_gpa"] == 0.0
    assert search_records([1, 2], "ann") == []
