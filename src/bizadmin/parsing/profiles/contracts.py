from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType, FieldKind, FieldSpec


CONTRACTS_SCHEMA = EntitySchema(
    entity=EntityType.contracts,
    fields=[
        FieldSpec("contract_no", required=True, aliases=("契約書NO",)),
        FieldSpec("owner", aliases=("担当",)),
        FieldSpec("model", aliases=("機種",)),
        FieldSpec("category", aliases=("区分",)),
        FieldSpec("serial_no", aliases=("機号",)),
        FieldSpec("contract_date", aliases=("契約日",)),
        FieldSpec("agent_name", aliases=("代理名称",)),
        FieldSpec("status", aliases=("契約状態",)),
        FieldSpec("shipping_order_no", aliases=("出荷指示書№",)),
        FieldSpec("signed_on", aliases=("契約日付",)),
        FieldSpec("unit_price", kind=FieldKind.number, aliases=("単価",)),
        FieldSpec("quantity", kind=FieldKind.number, aliases=("台数",)),
        FieldSpec("installment_term", aliases=("割賦時間",)),
        FieldSpec("notes_1", aliases=("備考①",)),
        FieldSpec("notes_2", aliases=("備考②",)),
    ],
)
