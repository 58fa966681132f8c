from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType, FieldSpec


CUSTOMERS_SCHEMA = EntitySchema(
    entity=EntityType.customers,
    fields=[
        FieldSpec("name", required=True, aliases=("客户名称",)),
        FieldSpec("contact", aliases=("联系方式",)),
    ],
)
