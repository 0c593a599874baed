from sernum.domain.errors import DuplicateEntry, ExportFailure, PersistenceFailure, StoreError
from sernum.usecases.error_mapping import map_export_error, map_store_error


def test_store_error_maps_to_persistence_failure_with_detail():
    err = map_store_error(StoreError("database is locked"))
    assert isinstance(err, PersistenceFailure)
    assert err.message == "Could not save changes: database is locked"


def test_unknown_store_exception_uses_class_name_when_message_empty():
    err = map_store_error(RuntimeError())
    assert isinstance(err, PersistenceFailure)
    assert err.message == "Could not save changes: RuntimeError"


def test_use_case_errors_pass_through():
    original = DuplicateEntry("A1")
    assert map_store_error(original) is original
    assert map_export_error(original) is original


def test_permission_error_maps_to_export_failure_with_path():
    err = map_export_error(PermissionError(13, "Permission denied", "/root/out.csv"))
    assert isinstance(err, ExportFailure)
    assert err.message == "Export failed: Permission denied: /root/out.csv"


def test_missing_folder_maps_to_export_failure():
    err = map_export_error(FileNotFoundError(2, "No such file", "/nope/out.csv"))
    assert err.message == "Export failed: Folder not found: /nope/out.csv"


def test_generic_export_error_keeps_text():
    err = map_export_error(OSError("disk full"))
    assert err.code == "EXPORT_FAILED"
    assert err.message == "Export failed: disk full"
