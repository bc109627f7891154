"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from typesync.document import DefinitionsDocument
from typesync.models import AssociationSpec, FieldKind, FieldSpec, ModelSchema, ValidatorSpec
from typesync.reflection import InMemoryModelReflection, SqlAlchemyModelReflection

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

POST_INTERFACE = """\
// AUTO-GENERATED for post
interface Post {
  title?: string;
  body: string;
  author_id: number;
  author?: Author;
}
"""


@pytest.fixture
def document_path(tmp_path: Path) -> Path:
    return tmp_path / "types" / "models.d.ts"


@pytest.fixture
def document(document_path: Path) -> DefinitionsDocument:
    return DefinitionsDocument.at(document_path)


@pytest.fixture
def post_document(document: DefinitionsDocument) -> DefinitionsDocument:
    """A document holding one hand-edited Post interface."""
    document.write(POST_INTERFACE)
    return document


@pytest.fixture
def post_schema() -> ModelSchema:
    return ModelSchema(
        name="Post",
        fields=[
            FieldSpec(name="title"),
            FieldSpec(name="body"),
            FieldSpec(name="author", kind=FieldKind.REFERENCE),
        ],
        validators=[ValidatorSpec(kind="presence", attributes=["title"])],
        associations=[AssociationSpec(name="author", macro="belongs_to", optional=False)],
    )


@pytest.fixture
def in_memory_reflection(post_schema: ModelSchema) -> InMemoryModelReflection:
    return InMemoryModelReflection([post_schema])


@pytest.fixture
def blog_reflection() -> SqlAlchemyModelReflection:
    from tests import blog_models

    return SqlAlchemyModelReflection(blog_models)
