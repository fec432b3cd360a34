import json

from marshmallow import fields, ValidationError

class FormJSON(fields.Field):
    """Wrap another field so it also accepts a JSON-encoded string.

    Multipart forms can only carry strings, so list values such as
    ``genre_ids`` or ``actors`` arrive as ``'[3, 5]'``. JSON bodies pass the
    decoded value straight through to the inner field.
    """

    def __init__(self, inner, **kwargs):
        super().__init__(**kwargs)
        self.inner = inner

    def _bind_to_schema(self, field_name, parent):
        super()._bind_to_schema(field_name, parent)
        self.inner._bind_to_schema(field_name, parent)

    def _serialize(self, value, attr, obj, **kwargs):
        return self.inner._serialize(value, attr, obj, **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            if not value.strip():
                return []
            try:
                value = json.loads(value)
            except ValueError:
                raise ValidationError("Not valid JSON.")
        return self.inner.deserialize(value, attr, data, **kwargs)
