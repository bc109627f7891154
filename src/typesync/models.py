from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    REFERENCE = "reference"
    OTHER = "other"


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind = FieldKind.OTHER
    referenced_name: str | None = None


class NormalizedField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str
    forced_required: bool = False


class ValidatorSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    attributes: list[str] = Field(default_factory=list)


class AssociationSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    macro: Literal["belongs_to", "has_one", "has_many"] = "belongs_to"
    optional: bool = True


class ModelSchema(BaseModel):
    """Reflected shape of one backend model."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: list[FieldSpec] = Field(default_factory=list)
    validators: list[ValidatorSpec] = Field(default_factory=list)
    associations: list[AssociationSpec] = Field(default_factory=list)


class ReconcileResult(BaseModel):
    interface: str = ""
    located: bool = False
    changed: bool = False
    changed_lines: int = 0
    unbalanced: bool = False
