from typesync.document.file import DefinitionsDocument

__all__ = ["DefinitionsDocument"]
