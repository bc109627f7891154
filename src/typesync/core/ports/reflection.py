from typing import Protocol

from typesync.models import ModelSchema


class MissingModelError(LookupError):
    def __init__(self, model_name: str) -> None:
        super().__init__(f"Model '{model_name}' could not be resolved for introspection")
        self.model_name = model_name


class ModelReflection(Protocol):
    def reflect(self, model_name: str) -> ModelSchema: ...

    def model_names(self) -> list[str]: ...
