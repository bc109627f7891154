import logging
from collections.abc import Iterable

from typesync.core.normalize import normalize_fields
from typesync.core.ports.reflection import ModelReflection
from typesync.core.presence import extract_required
from typesync.core.reconcile import reconcile_document
from typesync.core.synthesize import synthesize_interface, synthesize_migration_fields
from typesync.document.file import DefinitionsDocument
from typesync.models import FieldSpec, ReconcileResult

logger = logging.getLogger(__name__)


def generate_interface(document: DefinitionsDocument, model_name: str, fields: Iterable[FieldSpec]) -> str:
    """Append a new interface for ``model_name`` and return the appended text."""
    text = synthesize_interface(model_name, normalize_fields(fields))
    document.append(text)
    return text


def append_migration_fields(document: DefinitionsDocument, migration_label: str, fields: Iterable[FieldSpec]) -> str:
    """Append migration field declarations at the end of the document.

    The lines are not placed inside the interface they belong to.
    """
    text = synthesize_migration_fields(migration_label, normalize_fields(fields))
    document.append(text)
    return text


def sync_validations(document: DefinitionsDocument, reflection: ModelReflection, model_name: str) -> ReconcileResult:
    schema = reflection.reflect(model_name)
    required = extract_required(schema)
    logger.debug("Required fields for %s: %s", schema.name, sorted(required))
    return reconcile_document(document, schema.name, required)
