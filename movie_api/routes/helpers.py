import logging

from flask import current_app, request

from movie_api.models import db
from movie_api.storage import get_file_store, read_upload

logger = logging.getLogger(__name__)


def read_payload(file_field):
    """Split the request into (fields, upload).

    Multipart forms carry an optional image under ``file_field``; JSON bodies
    never do. Empty form values count as absent.
    """
    if request.is_json:
        return request.get_json(), None

    data = {key: value for key, value in request.form.items() if value != ""}
    upload = read_upload(
        request.files.get(file_field),
        file_field,
        current_app.config["MAX_IMAGE_BYTES"],
        current_app.config["ALLOWED_IMAGE_TYPES"],
    )
    return data, upload


def read_patch_operations():
    operations = request.get_json(silent=True)
    if not operations or not isinstance(operations, list):
        return None
    return operations


def commit(container, stored_reference=None):
    """Commit the session; on failure remove a blob stored for this request."""
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        if stored_reference:
            logger.warning("Save failed, removing orphaned blob %s", stored_reference)
            get_file_store().delete(stored_reference, container)
        raise
