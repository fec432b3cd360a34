import pytest
from marshmallow import ValidationError

from movie_api.patching import apply_patch
from movie_api.schemas.patch import patch_operations_schema


@pytest.fixture
def document():
    return {"title": "Inception", "release_date": "2010-07-16", "summary": None}


def patch(document, operations):
    return apply_patch(document, patch_operations_schema.load(operations))


def error_for(excinfo, index=0):
    return excinfo.value.messages["operations"][index][0]


def test_replace_and_add_set_the_field(document):
    patched = patch(document, [
        {"op": "replace", "path": "/title", "value": "Tenet"},
        {"op": "add", "path": "/summary", "value": "Time runs backwards."},
    ])
    assert patched == {"title": "Tenet", "release_date": "2010-07-16", "summary": "Time runs backwards."}


def test_original_document_is_not_mutated(document):
    patch(document, [{"op": "remove", "path": "/title"}])
    assert document["title"] == "Inception"


def test_remove_resets_to_null(document):
    assert patch(document, [{"op": "remove", "path": "/release_date"}])["release_date"] is None


def test_move_and_copy(document):
    moved = patch(document, [{"op": "move", "from": "/title", "path": "/summary"}])
    assert moved["summary"] == "Inception"
    assert moved["title"] is None

    copied = patch(document, [{"op": "copy", "from": "/title", "path": "/summary"}])
    assert copied["summary"] == copied["title"] == "Inception"


def test_test_operation(document):
    assert patch(document, [{"op": "test", "path": "/title", "value": "Inception"}]) == document

    with pytest.raises(ValidationError) as excinfo:
        patch(document, [{"op": "test", "path": "/title", "value": "Memento"}])
    assert "not equal" in error_for(excinfo)


def test_unknown_path_names_the_failing_operation(document):
    with pytest.raises(ValidationError) as excinfo:
        patch(document, [
            {"op": "replace", "path": "/title", "value": "Tenet"},
            {"op": "replace", "path": "/poster", "value": "x.png"},
        ])
    assert "/poster" in error_for(excinfo, 1)


def test_nested_paths_are_not_supported(document):
    with pytest.raises(ValidationError):
        patch(document, [{"op": "replace", "path": "/title/0", "value": "T"}])
    with pytest.raises(ValidationError):
        patch(document, [{"op": "replace", "path": "title", "value": "T"}])


def test_missing_value_or_from(document):
    with pytest.raises(ValidationError) as excinfo:
        patch(document, [{"op": "replace", "path": "/title"}])
    assert "requires a value" in error_for(excinfo)

    with pytest.raises(ValidationError) as excinfo:
        patch(document, [{"op": "copy", "path": "/title"}])
    assert "'from'" in error_for(excinfo)


def test_unsupported_op_is_rejected_by_schema():
    with pytest.raises(ValidationError) as excinfo:
        patch_operations_schema.load([{"op": "merge", "path": "/title", "value": "x"}])
    assert "op" in excinfo.value.messages[0]
