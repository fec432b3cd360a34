# JSON Patch (RFC 6902) over flat patch documents, top-level fields only
from marshmallow import ValidationError


def _fail(index, message):
    raise ValidationError({"operations": {index: [message]}})


def _field(document, pointer, index):
    # "/title" -> "title", with the JSON pointer escapes undone
    if not isinstance(pointer, str) or not pointer.startswith("/"):
        _fail(index, f"Invalid path '{pointer}'.")
    name = pointer[1:].replace("~1", "/").replace("~0", "~")
    if "/" in pointer[1:] or name not in document:
        _fail(index, f"The target location specified by path '{pointer}' was not found.")
    return name


def apply_patch(document, operations):
    """Return a copy of ``document`` with ``operations`` applied in order.

    ``operations`` are already shaped by ``PatchOperationSchema``: each has
    ``op`` and ``path``, optionally ``value`` and ``from_``.
    """
    patched = dict(document)

    for index, operation in enumerate(operations):
        op = operation["op"]
        target = _field(patched, operation["path"], index)

        if op in ("add", "replace", "test") and "value" not in operation:
            _fail(index, f"The '{op}' operation requires a value.")
        if op in ("move", "copy") and "from_" not in operation:
            _fail(index, f"The '{op}' operation requires a 'from' path.")

        if op in ("add", "replace"):
            patched[target] = operation["value"]
        elif op == "remove":
            patched[target] = None
        elif op == "move":
            source = _field(patched, operation["from_"], index)
            value = patched[source]
            patched[source] = None
            patched[target] = value
        elif op == "copy":
            source = _field(patched, operation["from_"], index)
            patched[target] = patched[source]
        elif op == "test":
            if patched[target] != operation["value"]:
                _fail(index, f"The current value at '{operation['path']}' is not equal to the test value.")
        else:
            _fail(index, f"Unsupported operation '{op}'.")

    return patched
