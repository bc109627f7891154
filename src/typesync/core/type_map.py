from typesync.models import FieldKind

_TYPESCRIPT_TYPES = {
    FieldKind.INTEGER: "number",
    FieldKind.FLOAT: "number",
    FieldKind.DECIMAL: "number",
    FieldKind.BOOLEAN: "boolean",
}

_KIND_ALIASES = {
    "bigint": FieldKind.INTEGER,
    "integer": FieldKind.INTEGER,
    "int": FieldKind.INTEGER,
    "float": FieldKind.FLOAT,
    "decimal": FieldKind.DECIMAL,
    "numeric": FieldKind.DECIMAL,
    "boolean": FieldKind.BOOLEAN,
    "bool": FieldKind.BOOLEAN,
    "references": FieldKind.REFERENCE,
    "reference": FieldKind.REFERENCE,
    "belongs_to": FieldKind.REFERENCE,
}

_DEFAULT_TYPE = "string"


def map_type(kind: FieldKind | str) -> str:
    """Return the TypeScript type for a field kind, falling back to ``string``."""
    if not isinstance(kind, FieldKind):
        try:
            kind = FieldKind(str(kind).strip().lower())
        except ValueError:
            return _DEFAULT_TYPE
    return _TYPESCRIPT_TYPES.get(kind, _DEFAULT_TYPE)


def parse_kind(token: str) -> FieldKind:
    return _KIND_ALIASES.get(token.strip().lower(), FieldKind.OTHER)
