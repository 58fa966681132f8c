from __future__ import annotations

from bizadmin.parsing.schema import EntitySchema, EntityType, FieldSpec


# Staff are maintained by hand in the dashboard, never bulk-imported.
PERSONNEL_SCHEMA = EntitySchema(
    entity=EntityType.personnel,
    fields=[
        FieldSpec("name", required=True),
        FieldSpec("position"),
        FieldSpec("area"),
        FieldSpec("dob"),           # YYYY-MM-DD
    ],
    importable=False,
)
