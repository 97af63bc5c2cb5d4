import json

import pytest

from larder.domain.FreezerMeal import FreezerMeal
from larder.domain.PantryItem import PantryItem
from larder.domain.Store import Store
from larder.infra.Json_Store_Repository import JsonStoreRepository
from larder.infra.Sqlite_Store_Repository import SqliteStoreRepository
from larder.utilities import transfer


def _store():
    return Store(
        pantry_items=[PantryItem(1, "Capers", "1 jar", "Condiments", "2027-05-01", "")],
        freezer_meals=[FreezerMeal(3, "Ragu", "5", "2026-08-12", "pork")],
    )


def test_export_then_import_moves_data_between_backends(tmp_path):
    source = JsonStoreRepository(tmp_path / "data.json")
    source.save(_store())
    exported = transfer.export_store(source, tmp_path / "export.json")

    target = SqliteStoreRepository(tmp_path / "data.db")
    transfer.import_store(target, exported)

    loaded = target.load()
    assert [i.to_dict() for i in loaded.pantry_items] == [i.to_dict() for i in _store().pantry_items]
    assert [m.to_dict() for m in loaded.freezer_meals] == [m.to_dict() for m in _store().freezer_meals]
    assert loaded.next_meal_id == 4


def test_export_writes_store_document(tmp_path):
    source = JsonStoreRepository(tmp_path / "data.json")
    source.save(_store())
    out = transfer.export_store(source, tmp_path / "out.json")
    doc = json.loads(out.read_text(encoding="utf-8"))
    assert doc["pantry_items"][0]["name"] == "Capers"


def test_import_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        transfer.import_store(JsonStoreRepository(tmp_path / "data.json"), tmp_path / "nope.json")


def test_cli_round_trip(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LARDER_STORAGE", "json")
    monkeypatch.setenv("LARDER_DATA_FILE", str(tmp_path / "data.json"))
    JsonStoreRepository(tmp_path / "data.json").save(_store())

    assert transfer.main(["export", "--file", str(tmp_path / "backup.json")]) == 0
    assert (tmp_path / "backup.json").exists()

    monkeypatch.setenv("LARDER_STORAGE", "sqlite")
    monkeypatch.setenv("LARDER_DB_FILE", str(tmp_path / "data.db"))
    assert transfer.main(["import", "--file", str(tmp_path / "backup.json")]) == 0
    assert "Imported 1 pantry items and 1 freezer meals" in capsys.readouterr().out
    assert SqliteStoreRepository(tmp_path / "data.db").load().pantry_items[0].name == "Capers"


def test_cli_import_requires_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LARDER_DATA_FILE", str(tmp_path / "data.json"))
    assert transfer.main(["import"]) == 1
    assert transfer.main(["import", "--file", str(tmp_path / "missing.json")]) == 1
