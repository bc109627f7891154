import re
from collections.abc import Iterable

from typesync.core.naming import pascal_case
from typesync.core.type_map import map_type, parse_kind
from typesync.models import FieldKind, FieldSpec, NormalizedField

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_TYPE_OPTIONS = re.compile(r"\{.*\}$")


def parse_attribute(token: str) -> FieldSpec:
    """Parse a generator-style ``name[:type[:modifier]]`` token.

    ``author:references`` becomes a reference field, ``title`` defaults to an
    ``other`` field. Modifiers such as ``index`` or ``uniq`` are ignored.
    """
    name, _, rest = token.strip().partition(":")
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid attribute '{token}': expected name[:type[:modifier]]")
    type_token = _TYPE_OPTIONS.sub("", rest.split(":", 1)[0])
    kind = parse_kind(type_token) if type_token else FieldKind.OTHER
    return FieldSpec(name=name, kind=kind)


def parse_attributes(tokens: Iterable[str]) -> list[FieldSpec]:
    return [parse_attribute(token) for token in tokens]


def normalize_fields(fields: Iterable[FieldSpec]) -> list[NormalizedField]:
    normalized: list[NormalizedField] = []
    for spec in fields:
        if spec.kind is FieldKind.REFERENCE:
            normalized.append(NormalizedField(name=f"{spec.name}_id", type_name="number", forced_required=True))
            normalized.append(NormalizedField(name=spec.name, type_name=pascal_case(spec.referenced_name or spec.name)))
        else:
            normalized.append(NormalizedField(name=spec.name, type_name=map_type(spec.kind)))
    return normalized
