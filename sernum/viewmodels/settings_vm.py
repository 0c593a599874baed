from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..utils.logging import env_requests_debug

DEFAULT_STORE_FILE = "serial_numbers.json"
DEFAULT_EXPORT_FILENAME = "SerialNumbers.csv"


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    store_path: str = DEFAULT_STORE_FILE
    export_dir: str = "."
    export_filename: str = DEFAULT_EXPORT_FILENAME
    notice_timeout_ms: int = 3000


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings UI state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def store_path(self) -> str:
        return self.config.store_path

    @store_path.setter
    def store_path(self, value: str) -> None:
        text = str(value or "").strip() or DEFAULT_STORE_FILE
        self.config = replace(self.config, store_path=text)

    @property
    def export_dir(self) -> str:
        return self.config.export_dir

    @export_dir.setter
    def export_dir(self, value: str) -> None:
        self.config = replace(self.config, export_dir=self._coerce_dir(value))

    @property
    def export_filename(self) -> str:
        return self.config.export_filename

    @export_filename.setter
    def export_filename(self, value: str) -> None:
        text = str(value or "").strip() or DEFAULT_EXPORT_FILENAME
        if not text.lower().endswith(".csv"):
            text = f"{text}.csv"
        self.config = replace(self.config, export_filename=text)

    @property
    def notice_timeout_ms(self) -> int:
        return self.config.notice_timeout_ms

    @notice_timeout_ms.setter
    def notice_timeout_ms(self, value: int) -> None:
        coerced = self._coerce_int("notice_timeout_ms", value)
        self.config = replace(self.config, notice_timeout_ms=coerced)

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = sorted(set(payload.keys()) - allowed)
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(unknown)}")

        if "store_path" in payload:
            self.store_path = payload["store_path"]
        if "export_dir" in payload:
            self.export_dir = payload["export_dir"]
        if "export_filename" in payload:
            self.export_filename = payload["export_filename"]
        if "notice_timeout_ms" in payload:
            self.notice_timeout_ms = payload["notice_timeout_ms"]
        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self.config)
        payload["debug_logging"] = bool(self.debug_logging)
        return payload

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    def set_export_dir(self, value: str) -> None:
        self.export_dir = value

    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_dir(value: Any) -> str:
        text = str(value or "").strip()
        return text or "."

    @staticmethod
    def _coerce_int(name: str, value: Any) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer.") from None
        if number < 0:
            raise ValueError(f"{name} must not be negative.")
        return number

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)


__all__ = ["SettingsConfig", "SettingsVM"]
