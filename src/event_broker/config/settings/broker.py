"""Config settings – BrokerSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import Sequence

from event_broker.config.settings.base import Settings
from event_broker.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from event_broker.config.validation import InvalidSettingValueError
from event_broker.kernel.errors import ValidationError
from event_broker.store.lifetime import DataLifetime

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class BrokerSettings(Settings):
    """Broker wiring options, read from ``EVENT_BROKER_*`` variables.

    ``default_lifetime`` applies to publish/prepare calls that omit a
    lifetime. ``thread_safe`` selects the locked broker.
    """

    _prefix: dataclasses.ClassVar[str] = "EVENT_BROKER"

    default_lifetime: str = DataLifetime.DELETE_BY_COMMAND.value
    thread_safe: bool = False
    log_level: str = "INFO"
    log_json: bool = True
    configure_logging: bool = False

    def _validate(self) -> None:
        try:
            DataLifetime.parse(self.default_lifetime)
        except ValidationError:
            raise InvalidSettingValueError(
                "default_lifetime",
                self.default_lifetime,
                f"expected one of {[m.value for m in DataLifetime]}",
            ) from None
        if self.log_level.strip().upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {list(_LOG_LEVELS)}"
            )

    @property
    def lifetime(self) -> DataLifetime:
        return DataLifetime.parse(self.default_lifetime)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.strip().upper())


def load_settings(loaders: Sequence[SettingsLoader] | None = None) -> BrokerSettings:
    """Build :class:`BrokerSettings` from *loaders*; later loaders win.

    Defaults to a single :class:`EnvSettingsLoader`.
    """
    merged: dict[str, object] = {}
    for loader in loaders or [EnvSettingsLoader()]:
        instance = loader.load(BrokerSettings)
        for field in dataclasses.fields(instance):
            merged[field.name] = getattr(instance, field.name)
    return BrokerSettings(**merged)  # type: ignore[arg-type]


__all__ = ["BrokerSettings", "load_settings"]
