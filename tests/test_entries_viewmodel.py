# Rev 0.1.0

from __future__ import annotations

import pytest

from dailies.viewmodels.entries_viewmodel import EntriesViewModel


def form(date: str, task: str = "Water", **extra) -> dict:
    base = {"date": date, "task": task, "hours": "", "units": "", "change_orders": "", "notes": ""}
    base.update(extra)
    return base


@pytest.fixture()
def vm(qapp, store):
    return EntriesViewModel(store)


@pytest.fixture()
def emitted(vm):
    seen: list = []
    vm.entriesReloaded.connect(lambda entries: seen.append(list(entries)))
    return seen


def test_submit_creates_and_notifies(vm, emitted):
    assert vm.submit(form("2024-01-02", hours="8")) is True
    assert vm.submit(form("2024-01-01")) is True
    assert len(emitted) == 2
    assert [e.date for e in emitted[-1]] == ["2024-01-01", "2024-01-02"]
    assert vm.submit_label() == "Add Entry"


def test_rejected_form_returns_false(vm, emitted):
    assert vm.submit(form("2024-01-01", task="")) is False
    assert vm.entries == []
    assert emitted == [[]]


def test_edit_and_resubmit_keeps_id(vm):
    editing: list[str] = []
    vm.editingChanged.connect(editing.append)
    vm.submit(form("2024-01-01", notes="first"))
    vm.submit(form("2024-01-05"))
    eid = vm.entries[0].id

    values = vm.begin_edit(eid)
    assert values["notes"] == "first"
    assert vm.submit_label() == "Update Entry"

    assert vm.submit(dict(values, date="2024-02-01")) is True
    assert vm.editing_id == ""
    assert editing == [eid, ""]
    assert vm.entries[-1].id == eid
    assert len(vm.entries) == 2


def test_begin_edit_unknown_id(vm):
    assert vm.begin_edit("missing") is None
    assert vm.editing_id == ""


def test_delete_entry_being_edited_leaves_edit_mode(vm, emitted):
    vm.submit(form("2024-01-01"))
    eid = vm.entries[0].id
    vm.begin_edit(eid)
    vm.delete_entry(eid)
    assert vm.entries == []
    assert vm.editing_id == ""
    assert emitted[-1] == []


def test_cancel_edit(vm):
    vm.submit(form("2024-01-01"))
    vm.begin_edit(vm.entries[0].id)
    vm.cancel_edit()
    assert vm.submit_label() == "Add Entry"
    vm.submit(form("2024-01-03"))
    assert len(vm.entries) == 2


def test_export_csv(vm, tmp_path):
    vm.submit(form("2024-01-01", task="Gas", hours="2", notes="a"))
    path = vm.export_csv(tmp_path / "x.csv")
    assert path.read_text(encoding="utf-8").splitlines()[1] == '2024-01-01,Gas,2,0,"a",0'
    assert vm.default_export_name().startswith("job-dailies-")
