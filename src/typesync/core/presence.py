from typesync.models import ModelSchema

PRESENCE = "presence"


def extract_required(schema: ModelSchema) -> set[str]:
    """Collect field names that must not carry the optional marker.

    Presence validators contribute their attributes. Each non-optional
    ``belongs_to`` association contributes its name and its ``_id`` column.
    """
    required: set[str] = set()
    for validator in schema.validators:
        if validator.kind == PRESENCE:
            required.update(validator.attributes)

    for association in schema.associations:
        if association.macro == "belongs_to" and not association.optional:
            required.add(association.name)
            required.add(f"{association.name}_id")

    return required
