from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType, FieldSpec


# the dashboard marks a live agent "合作中" (active).
AGENT_STATUS_ACTIVE = "合作中"

AGENTS_SCHEMA = EntitySchema(
    entity=EntityType.agents,
    fields=[
        FieldSpec("owner", aliases=("SS担当",)),
        FieldSpec("territory", aliases=("代理区域",)),
        FieldSpec("name", required=True, aliases=("代理商",)),
        FieldSpec("contact_person", aliases=("联系人",)),
        FieldSpec("phone", aliases=("电话",)),
        FieldSpec("address", aliases=("公司地址",)),
        FieldSpec("contract_date", aliases=("合同日期",)),
        FieldSpec("status", aliases=("代理状态",)),
        FieldSpec("notes", aliases=("备考",)),
    ],
    defaults={"status": AGENT_STATUS_ACTIVE},     # a file without a status column is all active agents
)
