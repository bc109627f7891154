"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from typesync.models import AssociationSpec, FieldKind, FieldSpec, ModelSchema, NormalizedField, ReconcileResult


class TestFieldSpec:
    def test_defaults_to_other_kind(self) -> None:
        spec = FieldSpec(name="title")
        assert spec.kind is FieldKind.OTHER
        assert spec.referenced_name is None

    def test_kind_from_string(self) -> None:
        assert FieldSpec(name="views", kind="integer").kind is FieldKind.INTEGER  # type: ignore[arg-type]

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            FieldSpec(name="x", kind="uuid")  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        spec = FieldSpec(name="title")
        with pytest.raises(ValidationError):
            spec.name = "body"  # type: ignore[misc]


class TestNormalizedField:
    def test_requires_type_name(self) -> None:
        with pytest.raises(ValidationError):
            NormalizedField(name="title")  # type: ignore[call-arg]


class TestAssociationSpec:
    def test_defaults_to_optional_belongs_to(self) -> None:
        association = AssociationSpec(name="author")
        assert association.macro == "belongs_to"
        assert association.optional is True

    def test_rejects_unknown_macro(self) -> None:
        with pytest.raises(ValidationError):
            AssociationSpec(name="tags", macro="has_and_belongs_to_many")  # type: ignore[arg-type]


class TestModelSchema:
    def test_round_trips_through_dict(self) -> None:
        data = {
            "name": "Post",
            "fields": [{"name": "author", "kind": "reference"}],
            "validators": [{"kind": "presence", "attributes": ["title"]}],
            "associations": [{"name": "author", "macro": "belongs_to", "optional": False}],
        }
        schema = ModelSchema.model_validate(data)
        assert schema.fields[0].kind is FieldKind.REFERENCE
        assert schema.model_dump(mode="json")["associations"] == data["associations"]


def test_reconcile_result_defaults() -> None:
    assert ReconcileResult().model_dump() == {
        "interface": "",
        "located": False,
        "changed": False,
        "changed_lines": 0,
        "unbalanced": False,
    }
