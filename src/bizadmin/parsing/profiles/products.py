from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType, FieldKind, FieldSpec


# `price` is the agent price (代理価格), `partition_price` the transfer price (仕切り価格).
PRODUCTS_SCHEMA = EntitySchema(
    entity=EntityType.products,
    fields=[
        FieldSpec("name", required=True, aliases=("機種",)),
        FieldSpec("category", aliases=("区分",)),
        FieldSpec("price", required=True, kind=FieldKind.number, aliases=("代理価格",)),
        FieldSpec("partition_price", kind=FieldKind.number, aliases=("仕切り価格",)),
        FieldSpec("options", aliases=("オプション",)),
        FieldSpec("notes", aliases=("備考",)),
    ],
)
