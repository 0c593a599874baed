import pytest

from sernum.viewmodels.settings_vm import SettingsVM


def test_settings_vm_defaults():
    vm = SettingsVM()
    payload = vm.to_dict()

    assert payload["store_path"] == "serial_numbers.json"
    assert payload["export_filename"] == "SerialNumbers.csv"
    assert payload["export_dir"] == "."
    assert payload["notice_timeout_ms"] == 3000
    assert "debug_logging" in payload


def test_settings_vm_apply_and_persist():
    vm = SettingsVM()
    vm.apply_dict(
        {
            "store_path": " lots/serials.json ",
            "export_dir": "  /tmp/exports  ",
            "export_filename": "Lot42",
            "notice_timeout_ms": "2500",
            "debug_logging": "yes",
        }
    )

    assert vm.store_path == "lots/serials.json"
    assert vm.export_dir == "/tmp/exports"
    assert vm.export_filename == "Lot42.csv"
    assert vm.notice_timeout_ms == 2500
    assert vm.debug_logging is True

    saved = []
    vm.on_save = saved.append
    vm.cmd_save()
    assert saved == [vm.to_dict()]


def test_settings_vm_blank_values_fall_back_to_defaults():
    vm = SettingsVM()
    vm.apply_dict({"store_path": "  ", "export_dir": "", "export_filename": None})

    assert vm.store_path == "serial_numbers.json"
    assert vm.export_dir == "."
    assert vm.export_filename == "SerialNumbers.csv"


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "a", "mapping"],
        {"box_urls": {"A": "http://a"}},
        {"notice_timeout_ms": "soon"},
        {"notice_timeout_ms": -1},
    ],
)
def test_settings_vm_rejects_invalid_payloads(payload):
    with pytest.raises(ValueError):
        SettingsVM().apply_dict(payload)
