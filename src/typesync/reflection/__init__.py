from typesync.reflection.memory import InMemoryModelReflection
from typesync.reflection.orm import SqlAlchemyModelReflection, column_kind, presence_of

__all__ = [
    "InMemoryModelReflection",
    "SqlAlchemyModelReflection",
    "column_kind",
    "presence_of",
]
