"""Config settings – dataclass base for environment-backed broker options."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Options read from ``<_prefix>_<FIELD>`` environment variables.

    Subclasses declare typed dataclass fields and set ``_prefix``; a field
    without a default must be present in the environment. Values are
    checked by :meth:`_validate` as soon as the instance is built, so a
    settings object that exists is always usable by :func:`create_broker`.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Raise ``InvalidSettingValueError`` for values the broker cannot use."""


__all__ = ["Settings"]
