"""
Test the in-memory entity tables.
"""

import threading

import pytest
from pydantic import ValidationError

from neudebri.schemas import Message, MessageCreate
from neudebri.services import EntityTable


def make_table():
    return EntityTable("message", Message)


def test_create_fills_defaults_and_id():
    table = make_table()
    record = table.create(
        MessageCreate(sender_id="a", receiver_id="b", content="hi"),
        sent_at="2026-10-19T10:00:00.000Z",
    )
    assert record.id
    assert record.is_read is False
    assert record.is_archived is False
    assert record.priority == "normal"
    assert record.read_at is None
    assert table.get(record.id) is record


def test_created_ids_are_unique():
    table = make_table()
    ids = {
        table.create(
            MessageCreate(sender_id="a", receiver_id="b", content=str(i)),
            sent_at="2026-10-19T10:00:00.000Z",
        ).id
        for i in range(50)
    }
    assert len(ids) == 50


def test_get_missing_is_none():
    table = make_table()
    assert table.get("missing") is None
    assert table.get(None) is None
    assert "missing" not in table


def test_update_missing_is_noop():
    table = make_table()
    assert table.update("missing", {"is_read": True}) is None
    assert len(table) == 0


def test_update_accepts_aliases_and_ignores_id():
    table = make_table()
    record = table.create(
        MessageCreate(sender_id="a", receiver_id="b", content="hi"),
        sent_at="2026-10-19T10:00:00.000Z",
    )
    original_id = record.id

    updated = table.update(
        record.id, {"isRead": True, "priority": "high", "id": "hijack", "bogus": 1}
    )

    assert updated is record
    assert updated.id == original_id
    assert updated.is_read is True
    assert updated.priority == "high"
    assert table.get("hijack") is None


def test_filter_and_find():
    table = make_table()
    for receiver in ("b", "c", "b"):
        table.create(
            MessageCreate(sender_id="a", receiver_id=receiver, content="hi"),
            sent_at="2026-10-19T10:00:00.000Z",
        )
    assert len(table.filter(lambda m: m.receiver_id == "b")) == 2
    assert table.find(lambda m: m.receiver_id == "c").receiver_id == "c"
    assert table.find(lambda m: m.receiver_id == "z") is None


def test_concurrent_creates_are_all_kept():
    table = make_table()

    def worker():
        for _ in range(100):
            table.create(
                MessageCreate(sender_id="a", receiver_id="b", content="x"),
                sent_at="2026-10-19T10:00:00.000Z",
            )

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(table) == 800


def test_seed_counts(store):
    assert len(store.users) == 5
    assert len(store.departments) == 6
    assert len(store.appointments) == 3
    assert len(store.health_records) == 6
    assert len(store.vital_signs) == 3
    assert len(store.lab_results) == 4
    assert len(store.prescriptions) == 3
    assert len(store.messages) == 3
    assert len(store.wards) == 4
    assert len(store.admissions) == 3


def test_unseeded_store_is_empty(empty_store):
    assert all(len(table) == 0 for table in empty_store.tables())


def test_update_rejects_patch_that_breaks_schema():
    table = make_table()
    record = table.create(
        MessageCreate(sender_id="a", receiver_id="b", content="hi"),
        sent_at="2026-10-19T10:00:00.000Z",
    )

    with pytest.raises(ValidationError):
        table.update(record.id, {"isRead": True, "content": None})

    # Nothing from the rejected patch is applied
    assert record.content == "hi"
    assert record.is_read is False
