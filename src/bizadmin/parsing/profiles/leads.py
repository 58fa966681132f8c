from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType, FieldSpec


# Sales leads ("collaborations" / 引合 in the dashboard).
# `quantity` and `visit_count` stay text: the lead form stores them as free text.
LEADS_SCHEMA = EntitySchema(
    entity=EntityType.leads,
    fields=[
        FieldSpec("lead_no", required=True, aliases=("引合番号",)),
        FieldSpec("owner", aliases=("担当",)),
        FieldSpec("region", aliases=("地域",)),
        FieldSpec("agent", aliases=("代理",)),
        FieldSpec("model", aliases=("機種",)),
        FieldSpec("quantity", aliases=("台数",)),
        FieldSpec("customer", aliases=("顧客情報",)),
        FieldSpec("opened_month", aliases=("案件発生年月",)),
        FieldSpec("visit_method", aliases=("访问方式",)),
        FieldSpec("visit_count", aliases=("訪問回数",)),
        FieldSpec("confidence", aliases=("確度",)),
        FieldSpec("confidence_change", aliases=("確度変更",)),
        FieldSpec("confidence_change_reason", aliases=("確度変更理由",)),
        FieldSpec("ship_window", aliases=("出荷可能時期",)),
        FieldSpec("final_result", aliases=("最終結果",)),
        FieldSpec("shipped_on", aliases=("出荷日(実際）",)),
        FieldSpec("notes_detail", aliases=("備考①引合詳細、補充内容",)),
        FieldSpec("notes_history", aliases=("備考②引合状況変化記録等",)),
        FieldSpec("notes_extra", aliases=("備考③",)),
    ],
)
