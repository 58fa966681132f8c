from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence


class EntityType(str, Enum):
    """Every master-data collection. The value doubles as its storage key."""
    leads = "leads"
    contracts = "contracts"
    agents = "agents"
    products = "products"
    customers = "customers"
    personnel = "personnel"


class FieldKind(str, Enum):
    text = "text"
    number = "number"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Any given field's configurable expectations."""
    name: str                               # canonical field name, also the record key.
    required: bool = False                  # column must exist and every cell must be non-empty.
    kind: FieldKind = FieldKind.text
    aliases: tuple[str, ...] = ()           # other accepted header spellings.

    @property
    def numeric(self) -> bool:
        return self.kind is FieldKind.number

    def header_names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


@dataclass(frozen=True)
class EntitySchema:
    """
    One entity's import/export contract.

    - `fields` is ordered, export columns follow it.
    - `defaults` backfills optional fields whose column is absent from an imported header.
      Fields not listed default to `""` (text) or `None` (number).
    - `importable` is `False` for collections that are only ever exported.
    """
    entity: EntityType
    fields: Sequence[FieldSpec]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    importable: bool = True

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"{self.entity.value}: duplicate field names {names}")

        # every header spelling must resolve to exactly one field
        seen: dict[str, str] = {}
        for f in self.fields:
            for h in f.header_names():
                if h in seen and seen[h] != f.name:
                    raise ValueError(f"{self.entity.value}: header {h!r} maps to both {seen[h]} and {f.name}")
                seen[h] = f.name

        unknown = set(self.defaults) - set(names)
        if unknown:
            raise ValueError(f"{self.entity.value}: defaults for unknown fields {sorted(unknown)}")

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def required_fields(self) -> list[str]:
        return [f.name for f in self.fields if f.required]

    @property
    def numeric_fields(self) -> list[str]:
        return [f.name for f in self.fields if f.numeric]

    @property
    def header_aliases(self) -> dict[str, str]:
        """Allowed header text -> canonical field name."""
        return {h: f.name for f in self.fields for h in f.header_names()}

    def default_for(self, f: FieldSpec) -> Any:
        if f.name in self.defaults:
            return self.defaults[f.name]
        return None if f.numeric else ""

    def default_record(self) -> dict[str, Any]:
        """A blank record (no `id`) with every field at its default."""
        return {f.name: self.default_for(f) for f in self.fields}
