from collections.abc import Iterable

from typesync.core.naming import pascal_case
from typesync.core.ports.reflection import MissingModelError
from typesync.models import ModelSchema


class InMemoryModelReflection:
    def __init__(self, schemas: Iterable[ModelSchema] = ()) -> None:
        self.schemas: dict[str, ModelSchema] = {}
        for schema in schemas:
            self.add(schema)

    def add(self, schema: ModelSchema) -> None:
        self.schemas[pascal_case(schema.name)] = schema

    def reflect(self, model_name: str) -> ModelSchema:
        schema = self.schemas.get(pascal_case(model_name))
        if schema is None:
            raise MissingModelError(model_name)
        return schema

    def model_names(self) -> list[str]:
        return sorted(self.schemas)
