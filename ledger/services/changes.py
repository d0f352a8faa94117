from __future__ import annotations

from dataclasses import dataclass, fields

from ledger.errors import ValidationError


@dataclass
class _Changes:
    """
    Partial update options. None means "leave as is"; any other value,
    the empty string included, is written.
    """

    def present(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def apply_to(self, obj) -> None:
        for k, v in self.present().items():
            setattr(obj, k, v)

    @classmethod
    def from_payload(cls, data: dict | None):
        data = data or {}
        if not isinstance(data, dict):
            raise ValidationError("request body must be a JSON object")
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})


@dataclass
class BookChanges(_Changes):
    title: str | None = None
    author: str | None = None


@dataclass
class ReaderChanges(_Changes):
    name: str | None = None
    phone: str | None = None
