# Rev 0.1.0

from __future__ import annotations
from datetime import date

from dailies.models.entities import Entry
from dailies.services.csv_exporter import (
    CSV_MIME_TYPE,
    HEADERS,
    export_filename,
    to_csv,
    write_csv,
)


EXPECTED = (
    "Date,Task,Hours,Units Completed,Notes,Change Orders\n"
    '2024-01-01,Subrough,4,1,"",1.5\n'
    '2024-01-02,Water,8,3,"ok, fine",0'
)


def seed_scenario(store):
    store.create(date="2024-01-02", task="Water", hours=8, units=3, notes="ok, fine", change_orders=0)
    store.create(date="2024-01-01", task="Subrough", hours=4, units=1, notes="", change_orders=1.5)


def test_scenario_from_store_order(store):
    seed_scenario(store)
    assert to_csv(store.export_rows()) == EXPECTED


def test_header_only_for_empty_list():
    assert to_csv([]) == ",".join(HEADERS)
    assert HEADERS == ("Date", "Task", "Hours", "Units Completed", "Notes", "Change Orders")


def test_notes_quotes_are_doubled():
    e = Entry("a", "2024-01-01", "Tubs", 1.0, 0.0, 0.0, 'said "done", left')
    line = to_csv([e]).splitlines()[1]
    assert line == '2024-01-01,Tubs,1,0,"said ""done"", left",0'


def test_export_does_not_mutate_store(store):
    seed_scenario(store)
    before = store.entries
    to_csv(store.export_rows())
    assert store.entries == before


def test_filename_embeds_export_date():
    assert export_filename(date(2026, 3, 9)) == "job-dailies-2026-03-09.csv"
    assert CSV_MIME_TYPE == "text/csv"


def test_write_csv_into_directory_uses_default_name(store, tmp_path):
    seed_scenario(store)
    path = write_csv(store.export_rows(), tmp_path, today=date(2024, 2, 1))
    assert path == tmp_path / "job-dailies-2024-02-01.csv"
    assert path.read_text(encoding="utf-8") == EXPECTED


def test_write_csv_to_explicit_file(tmp_path):
    target = tmp_path / "out.csv"
    assert write_csv([], target) == target
    assert target.read_bytes() == ",".join(HEADERS).encode("utf-8")
