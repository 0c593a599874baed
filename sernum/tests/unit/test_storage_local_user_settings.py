import json
import os

import pytest

from sernum.adapters.storage_local import StorageLocal
from sernum.viewmodels.settings_vm import SettingsVM


def test_user_settings_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    payload = {
        "store_path": "data/serials.json",
        "export_dir": "/exports",
        "export_filename": "Lot42.csv",
        "notice_timeout_ms": 1500,
        "debug_logging": True,
    }

    storage.save_user_settings(payload)
    loaded = storage.load_user_settings()

    assert loaded == payload


def test_user_settings_missing_file_and_save(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    settings_path = tmp_path / "user_settings.json"

    assert storage.load_user_settings() is None
    assert not settings_path.exists()

    vm = SettingsVM()
    storage.save_user_settings(vm.to_dict())

    assert settings_path.exists()
    with settings_path.open("r", encoding="utf-8") as fh:
        persisted = json.load(fh)

    assert persisted == vm.to_dict()


def test_user_settings_non_object_rejected(tmp_path):
    (tmp_path / "user_settings.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        StorageLocal(root_dir=str(tmp_path)).load_user_settings()


def test_resolve_relative_and_absolute(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    assert storage.resolve("serials.json") == os.path.join(str(tmp_path), "serials.json")
    absolute = str(tmp_path / "elsewhere.json")
    assert storage.resolve(absolute) == absolute
