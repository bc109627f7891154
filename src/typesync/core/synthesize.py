from collections.abc import Iterable

from typesync.core.naming import pascal_case
from typesync.models import NormalizedField

_INDENT = "  "


def render_field(field: NormalizedField) -> str:
    marker = "" if field.forced_required else "?"
    return f"{_INDENT}{field.name}{marker}: {field.type_name};"


def synthesize_interface(model_name: str, fields: Iterable[NormalizedField]) -> str:
    """Render a fresh interface block for ``model_name``.

    Does not look at the target document, so rendering the same model twice
    yields two blocks with the same name once both are appended.
    """
    lines = [f"// AUTO-GENERATED for {model_name}", f"interface {pascal_case(model_name)} {{"]
    lines.extend(render_field(field) for field in fields)
    lines.append("}")
    return "\n".join(lines) + "\n"


def synthesize_migration_fields(migration_label: str, fields: Iterable[NormalizedField]) -> str:
    lines = [f"// AUTO-GENERATED by migration {migration_label}"]
    lines.extend(render_field(field) for field in fields)
    return "\n".join(lines) + "\n"
