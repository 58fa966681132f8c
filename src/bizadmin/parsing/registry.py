from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType


def _coerce_entity(entity: EntityType | str) -> EntityType:
    """Accept the enum or its storage-key spelling. Raise on anything else."""
    if isinstance(entity, EntityType):
        return entity
    try:
        return EntityType(str(entity).strip())
    except ValueError:
        available = ", ".join(e.value for e in EntityType)
        raise ValueError(f"Unknown entity: {entity!r}. Available: {available}") from None


def get_entity_schema(entity: EntityType | str) -> EntitySchema:
    """
    A registry that assigns each entity its schema. `FieldSpec` lists live in the profile modules.
    """
    e = _coerce_entity(entity)

    if e is EntityType.leads:
        from .profiles.leads import LEADS_SCHEMA
        return LEADS_SCHEMA

    if e is EntityType.contracts:
        from .profiles.contracts import CONTRACTS_SCHEMA
        return CONTRACTS_SCHEMA

    if e is EntityType.agents:
        from .profiles.agents import AGENTS_SCHEMA
        return AGENTS_SCHEMA

    if e is EntityType.products:
        from .profiles.products import PRODUCTS_SCHEMA
        return PRODUCTS_SCHEMA

    if e is EntityType.customers:
        from .profiles.customers import CUSTOMERS_SCHEMA
        return CUSTOMERS_SCHEMA

    if e is EntityType.personnel:
        from .profiles.personnel import PERSONNEL_SCHEMA
        return PERSONNEL_SCHEMA

    raise ValueError(f"Unknown entity: {entity!r}")


def get_import_schema(entity: EntityType | str) -> EntitySchema:
    """Like `get_entity_schema`, but raise for export-only collections."""
    schema = get_entity_schema(entity)
    if not schema.importable:
        raise ValueError(f"{schema.entity.value} does not support CSV import")
    return schema


# choices offered by the CLI.
ALL_ENTITIES: tuple[str, ...] = tuple(e.value for e in EntityType)
IMPORTABLE_ENTITIES: tuple[str, ...] = tuple(e.value for e in EntityType if get_entity_schema(e).importable)
