# Rev 0.1.0

from __future__ import annotations
import json
import logging

import pytest

from dailies.models.entities import EntryValidationError
from dailies.services.entry_store import DEFAULT_SLOT_KEY, EntryStore


def add(store: EntryStore, date: str, task: str = "Water", **fields):
    return store.create(date=date, task=task, **fields)


def dates(entries) -> list[str]:
    return [e.date for e in entries]


# --- load --------------------------------------------------------------------

def test_load_absent_slot_starts_empty(slots):
    s = EntryStore(slots)
    assert s.load() == []
    assert slots.get(DEFAULT_SLOT_KEY) is None


def test_load_sorts_persisted_entries(slots):
    slots.put(DEFAULT_SLOT_KEY, json.dumps([
        {"id": "b", "date": "2024-03-01", "task": "Gas", "hours": 1, "unitsCompleted": 0, "notes": "", "changeOrders": 0},
        {"id": "a", "date": "2024-01-01", "task": "Tubs", "hours": 2, "unitsCompleted": 1, "notes": "", "changeOrders": 0},
    ]))
    s = EntryStore(slots)
    assert [e.id for e in s.load()] == ["a", "b"]


@pytest.mark.parametrize("payload", ["{not json", '{"id": "a"}', '[1, 2]'])
def test_load_corrupt_payload_fails_soft(slots, caplog, payload):
    slots.put(DEFAULT_SLOT_KEY, payload)
    s = EntryStore(slots)
    with caplog.at_level(logging.ERROR, logger="dailies.services.entry_store"):
        assert s.load() == []
    assert any("Error parsing saved entries" in r.getMessage() for r in caplog.records)


# --- create ------------------------------------------------------------------

def test_sort_invariant_after_every_create(store):
    for d in ["2024-05-01", "2024-01-15", "2024-03-03", "2024-01-01", "2024-12-31"]:
        entries = add(store, d)
        assert dates(entries) == sorted(dates(entries))


def test_ids_are_unique(store):
    for i in range(50):
        add(store, f"2024-01-{(i % 28) + 1:02d}")
    ids = [e.id for e in store.entries]
    assert len(ids) == len(set(ids)) == 50


def test_colliding_id_factory_is_redrawn(slots):
    ids = iter(["dup", "dup", "dup", "fresh"])
    s = EntryStore(slots, id_factory=lambda: next(ids))
    s.load()
    add(s, "2024-01-01")
    add(s, "2024-01-02")
    assert sorted(e.id for e in s.entries) == ["dup", "fresh"]


@pytest.mark.parametrize("raw, expected", [("", 0.0), ("abc", 0.0), ("3.5", 3.5)])
def test_hours_coercion(store, raw, expected):
    entry, = add(store, "2024-01-01", hours=raw)
    assert entry.hours == expected


def test_missing_numeric_fields_default_to_zero(store):
    entry, = add(store, "2024-01-01", task="Drainage")
    assert (entry.hours, entry.units_completed, entry.change_orders) == (0.0, 0.0, 0.0)


def test_create_rejects_unknown_task_without_persisting(store, slots):
    with pytest.raises(EntryValidationError):
        add(store, "2024-01-01", task="Roofing")
    assert store.entries == []
    assert slots.get(DEFAULT_SLOT_KEY) is None


def test_create_persists_full_list(store, slots):
    add(store, "2024-01-02", notes="second")
    add(store, "2024-01-01", notes="first")
    persisted = json.loads(slots.get(DEFAULT_SLOT_KEY))
    assert [p["notes"] for p in persisted] == ["first", "second"]


# --- persistence round trip --------------------------------------------------

def test_round_trip_through_slot(store, slots):
    add(store, "2024-02-01", task="Heaters", hours="7.5", units="2", change_orders="1", notes='say "hi"')
    add(store, "2024-01-10", task="Water Main", hours="4")
    add(store, "2024-01-10", task="Fire & Nail", notes="tie")
    before = store.entries

    reloaded = EntryStore(slots)
    assert reloaded.load() == before


# --- update ------------------------------------------------------------------

def test_update_preserves_id_and_resorts(store):
    add(store, "2024-01-01", task="Water")
    add(store, "2024-01-05", task="Gas")
    target = store.entries[0]

    entries = store.update(target.id, date="2024-02-01", task="Subrough", hours="6")
    assert entries[-1].id == target.id
    assert entries[-1].date == "2024-02-01"
    assert entries[-1].task == "Subrough"
    assert dates(entries) == sorted(dates(entries))
    assert len(entries) == 2


def test_update_replaces_all_fields(store):
    add(store, "2024-01-01", hours="3", units="4", change_orders="2", notes="old")
    eid = store.entries[0].id
    entry, = store.update(eid, date="2024-01-01", task="Water")
    assert (entry.hours, entry.units_completed, entry.change_orders, entry.notes) == (0.0, 0.0, 0.0, "")


def test_update_unknown_id_is_noop(store, caplog):
    add(store, "2024-01-01")
    before = store.entries
    with caplog.at_level(logging.WARNING):
        assert store.update("nope", date="2024-01-09", task="Gas") == before
    assert "no entry with id nope" in caplog.text


# --- delete ------------------------------------------------------------------

def test_delete_removes_exactly_one(store, slots):
    for d in ["2024-01-01", "2024-01-02", "2024-01-03"]:
        add(store, d)
    victim = store.entries[1].id
    entries = store.delete(victim)
    assert len(entries) == 2
    assert all(e.id != victim for e in entries)
    assert victim not in slots.get(DEFAULT_SLOT_KEY)


def test_delete_unknown_id_is_noop(store):
    add(store, "2024-01-01")
    assert len(store.delete("missing")) == 1


# --- reads -------------------------------------------------------------------

def test_export_rows_is_a_read_only_copy(store):
    add(store, "2024-01-02")
    add(store, "2024-01-01")
    rows = store.export_rows()
    rows.clear()
    assert len(store.entries) == 2
    assert dates(store.export_rows()) == ["2024-01-01", "2024-01-02"]


def test_get_by_id(store):
    entry, = add(store, "2024-01-01")
    assert store.get(entry.id) == entry
    assert store.get("missing") is None
