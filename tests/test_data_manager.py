"""Tests for the file-backed result store."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from dna_spectrum_engine.core.config_loader import Settings, StorageConfig
from dna_spectrum_engine.core.data_manager import DataManager
from dna_spectrum_engine.core.exceptions import PersistenceError


@pytest.fixture
def store(settings):
    return DataManager(settings)


def test_creates_output_directory(settings):
    DataManager(settings)
    assert settings.storage.directory.is_dir()


def test_save_and_get(store, make_result):
    result = make_result()
    assert store.save_result(result) == result.id

    path = store.output_dir / f"assessment_{result.id}.json"
    assert path.exists()
    assert store.get_result(result.id) == result


def test_files_use_wire_format(store, make_result):
    result = make_result()
    store.save_result(result)

    text = (store.output_dir / f"assessment_{result.id}.json").read_text(encoding="utf-8")
    assert '"clientName": "Jane Doe"' in text
    assert '"profileName": "Adaptive Driver"' in text


def test_yaml_format(tmp_path, make_result):
    store = DataManager(Settings(storage=StorageConfig(directory=tmp_path, format="yaml")))
    result = make_result()
    store.save_result(result)

    assert (tmp_path / f"assessment_{result.id}.yaml").exists()
    assert store.get_result(result.id) == result


@pytest.mark.parametrize("assessment_id", ["not-a-uuid", "../../etc/passwd", ""])
def test_non_uuid_ids_are_unknown(store, assessment_id):
    assert store.get_result(assessment_id) is None
    assert store.delete_result(assessment_id) is False


def test_save_rejects_non_uuid_id(store, make_result):
    result = make_result().model_copy(update={"id": "not-a-uuid"})
    with pytest.raises(PersistenceError):
        store.save_result(result)


def test_missing_result_is_none(store):
    assert store.get_result("00000000-0000-4000-8000-000000000000") is None


def test_corrupt_file_raises_on_get_and_is_skipped_on_list(store, make_result):
    good = make_result()
    bad = make_result()
    store.save_result(good)
    store.save_result(bad)
    (store.output_dir / f"assessment_{bad.id}.json").write_text("[]", encoding="utf-8")

    with pytest.raises(PersistenceError):
        store.get_result(bad.id)
    assert [r.id for r in store.list_results()] == [good.id]


def test_delete(store, make_result):
    result = make_result()
    store.save_result(result)

    assert store.delete_result(result.id) is True
    assert store.get_result(result.id) is None
    assert store.delete_result(result.id) is False


def test_list_results_newest_first_with_paging(store, make_result):
    now = datetime.now(timezone.utc)
    results = [make_result(completed_at=now - timedelta(hours=h)) for h in (5, 1, 3)]
    for result in results:
        store.save_result(result)

    listed = store.list_results()
    assert [r.id for r in listed] == [results[1].id, results[2].id, results[0].id]
    assert [r.id for r in store.list_results(limit=1, offset=1)] == [results[2].id]
    assert store.list_results(offset=10) == []


def test_get_stats(store, make_result):
    now = datetime(2026, 3, 31, 12, 0, tzinfo=timezone.utc)
    for days in (0, 6, 7.5, 29, 31):
        store.save_result(make_result(completed_at=now - timedelta(days=days)))

    stats = store.get_stats(now=now)
    assert stats.total == 5
    assert stats.this_week == 2
    assert stats.this_month == 4


def test_write_is_retried_on_os_error(store, make_result):
    result = make_result()
    real_open = type(store.output_dir).open
    calls = {"count": 0}

    def flaky_open(self, *args, **kwargs):
        if args and args[0] == "w":
            calls["count"] += 1
            if calls["count"] == 1:
                raise OSError("transient")
        return real_open(self, *args, **kwargs)

    with patch.object(type(store.output_dir), "open", flaky_open):
        store.save_result(result)

    assert calls["count"] == 2
    assert store.get_result(result.id) == result


def test_persistent_write_failure_raises(store, make_result):
    def failing_open(self, *args, **kwargs):
        raise OSError("read-only file system")

    with patch.object(type(store.output_dir), "open", failing_open):
        with pytest.raises(PersistenceError):
            store.save_result(make_result())
