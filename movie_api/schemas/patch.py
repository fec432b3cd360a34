from movie_api.schemas import ma
from marshmallow import fields, validate

OPERATIONS = ("add", "remove", "replace", "move", "copy", "test")

class PatchOperationSchema(ma.Schema):
    op = fields.String(required=True, validate=validate.OneOf(OPERATIONS))
    path = fields.String(required=True)
    value = fields.Raw(allow_none=True)
    from_ = fields.String(data_key="from")

patch_operations_schema = PatchOperationSchema(many=True)
