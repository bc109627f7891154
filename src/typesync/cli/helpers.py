import sys
from pathlib import Path

from typesync.core.ports.reflection import ModelReflection
from typesync.document.file import DefinitionsDocument
from typesync.settings import get_settings


def resolve_document(path: Path | None) -> DefinitionsDocument:
    return DefinitionsDocument.at(path or get_settings().document)


def load_reflection(module_path: str | None) -> ModelReflection:
    from typesync.reflection.orm import SqlAlchemyModelReflection

    module_path = module_path or get_settings().models_module
    if not module_path:
        raise ValueError("No models module given. Pass --models or set TYPESYNC_MODELS.")

    # model modules live in the project being synced, like alembic's prepend_sys_path
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    return SqlAlchemyModelReflection.from_module(module_path)
