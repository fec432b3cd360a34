import logging
import os
import uuid
from collections import namedtuple
from urllib.parse import urlparse

from flask import current_app, request
from marshmallow import ValidationError

logger = logging.getLogger(__name__)

Upload = namedtuple("Upload", ["content", "extension", "content_type"])


class FileStore:
    """Stores binary blobs and hands back a reference string."""

    def store(self, content, extension, container, content_type):
        raise NotImplementedError

    def delete(self, reference, container):
        raise NotImplementedError

    def replace(self, content, extension, container, previous_reference, content_type):
        if previous_reference:
            self.delete(previous_reference, container)
        return self.store(content, extension, container, content_type)


class LocalFileStore(FileStore):
    """Keeps blobs on disk under ``root/<container>/`` and returns public URLs."""

    def __init__(self, root, base_url):
        self.root = root
        self.base_url = base_url.rstrip("/")

    def store(self, content, extension, container, content_type):
        folder = os.path.join(self.root, container)
        os.makedirs(folder, exist_ok=True)

        filename = f"{uuid.uuid4()}{extension}"
        with open(os.path.join(folder, filename), "wb") as blob:
            blob.write(content)

        logger.info("Stored %s (%s, %d bytes) in %s", filename, content_type, len(content), container)
        return f"{self.base_url}/{container}/{filename}"

    def delete(self, reference, container):
        if not reference:
            return
        filename = os.path.basename(urlparse(reference).path)
        path = os.path.join(self.root, container, filename)
        if os.path.exists(path):
            os.remove(path)
            logger.info("Deleted %s from %s", filename, container)


def get_file_store():
    """File store for the current request, publishing under this host's URL."""
    base_url = request.host_url.rstrip("/") + current_app.config["UPLOAD_URL_PATH"]
    return LocalFileStore(current_app.config["UPLOAD_FOLDER"], base_url)


def read_upload(file_storage, field, max_bytes, allowed_types):
    """Read an uploaded file fully into memory.

    Returns ``None`` when nothing was sent. Raises ValidationError keyed by
    ``field`` for oversized files or unsupported content types.
    """
    if file_storage is None or not file_storage.filename:
        return None

    content = file_storage.read()
    if len(content) > max_bytes:
        raise ValidationError({field: [f"File exceeds {max_bytes} bytes."]})
    if file_storage.mimetype not in allowed_types:
        raise ValidationError({
            field: [f"Unsupported content type '{file_storage.mimetype}'. Allowed: {', '.join(allowed_types)}"]
        })

    extension = os.path.splitext(file_storage.filename)[1]
    return Upload(content, extension, file_storage.mimetype)
