"""Model reflection over SQLAlchemy declarative mappings."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any

from sqlalchemy import Boolean, Column, Float, Integer, Numeric, inspect, orm
from sqlalchemy.orm import Mapper, RelationshipDirection, RelationshipProperty, validates

from typesync.core.naming import pascal_case
from typesync.core.ports.reflection import MissingModelError
from typesync.core.presence import PRESENCE
from typesync.models import AssociationSpec, FieldKind, FieldSpec, ModelSchema, ValidatorSpec

logger = logging.getLogger(__name__)

_PRESENCE_ATTR = "__typesync_presence_of__"


def presence_of(*names: str) -> Callable[[Any, str, Any], Any]:
    """Build a ``validates`` hook rejecting ``None`` and blank strings.

    Assign the result as a class attribute of a mapped class::

        class Post(Base):
            validate_presence = presence_of("title", "author")
    """

    def validate(self: Any, key: str, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(f"{type(self).__name__}.{key} can't be blank")
        return value

    setattr(validate, _PRESENCE_ATTR, names)
    return validates(*names)(validate)


def column_kind(column: Column[Any]) -> FieldKind:
    column_type = column.type
    # Float subclasses Numeric
    if isinstance(column_type, Float):
        return FieldKind.FLOAT
    if isinstance(column_type, Numeric):
        return FieldKind.DECIMAL
    if isinstance(column_type, Boolean):
        return FieldKind.BOOLEAN
    if isinstance(column_type, Integer):
        return FieldKind.INTEGER
    return FieldKind.OTHER


def _mapped_classes(target: Any) -> list[type]:
    candidates: Iterable[Any] = vars(target).values() if isinstance(target, ModuleType) else [target]
    classes: list[type] = []
    for obj in candidates:
        if not isinstance(obj, type):
            continue
        registry = getattr(obj, "registry", None)
        if isinstance(registry, orm.registry):
            classes.extend(mapper.class_ for mapper in registry.mappers)
        elif isinstance(inspect(obj, raiseerr=False), Mapper):
            classes.append(obj)
    return classes


def _association(relationship: RelationshipProperty[Any]) -> AssociationSpec:
    if relationship.direction is RelationshipDirection.MANYTOONE:
        optional = any(column.nullable for column in relationship.local_columns)
        return AssociationSpec(name=relationship.key, macro="belongs_to", optional=optional)
    macro = "has_many" if relationship.uselist else "has_one"
    return AssociationSpec(name=relationship.key, macro=macro, optional=True)


class SqlAlchemyModelReflection:
    """Implements the ``ModelReflection`` protocol for SQLAlchemy mapped classes.

    Models are looked up by class name, snake-case class name, or table name.
    """

    def __init__(self, *targets: Any) -> None:
        self._by_name: dict[str, type] = {}
        self._by_table: dict[str, type] = {}
        for target in targets:
            for cls in _mapped_classes(target):
                self._by_name[cls.__name__] = cls
                table = getattr(cls, "__tablename__", None)
                if table:
                    self._by_table[str(table)] = cls

    @classmethod
    def from_module(cls, module_path: str) -> SqlAlchemyModelReflection:
        module = importlib.import_module(module_path)
        return cls(module)

    def model_names(self) -> list[str]:
        return sorted(self._by_name)

    def reflect(self, model_name: str) -> ModelSchema:
        cls = self._by_name.get(pascal_case(model_name)) or self._by_table.get(model_name)
        if cls is None:
            raise MissingModelError(model_name)
        mapper = inspect(cls)
        logger.debug("Reflecting %s from table %s", cls.__name__, mapper.local_table)

        belongs_to: dict[str, RelationshipProperty[Any]] = {}
        associations: list[AssociationSpec] = []
        for relationship in mapper.relationships:
            associations.append(_association(relationship))
            if relationship.direction is RelationshipDirection.MANYTOONE:
                for column in relationship.local_columns:
                    belongs_to.setdefault(column.key, relationship)

        fields: list[FieldSpec] = []
        emitted: set[str] = set()
        presence_columns: list[str] = []
        for prop in mapper.column_attrs:
            column = prop.columns[0]
            if column.primary_key:
                continue
            if column.info.get(PRESENCE):
                presence_columns.append(prop.key)
            relationship = belongs_to.get(column.key)
            if relationship is None:
                fields.append(FieldSpec(name=prop.key, kind=column_kind(column)))
            elif relationship.key not in emitted:
                emitted.add(relationship.key)
                fields.append(_reference_field(relationship))

        for relationship in belongs_to.values():
            if relationship.key not in emitted:
                emitted.add(relationship.key)
                fields.append(_reference_field(relationship))

        presence_attributes = [
            key for key, (method, _opts) in mapper.validators.items() if getattr(method, _PRESENCE_ATTR, None)
        ]
        validators: list[ValidatorSpec] = []
        if presence_attributes:
            validators.append(ValidatorSpec(kind=PRESENCE, attributes=presence_attributes))
        if presence_columns:
            validators.append(ValidatorSpec(kind=PRESENCE, attributes=presence_columns))

        return ModelSchema(name=cls.__name__, fields=fields, validators=validators, associations=associations)


def _reference_field(relationship: RelationshipProperty[Any]) -> FieldSpec:
    return FieldSpec(
        name=relationship.key,
        kind=FieldKind.REFERENCE,
        referenced_name=relationship.mapper.class_.__name__,
    )
