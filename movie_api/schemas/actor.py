from movie_api.models.actor import Actor
from movie_api.schemas import ma
from marshmallow import EXCLUDE, fields, validate

class ActorSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Actor
        unknown = EXCLUDE

    actor_id = fields.Int(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1, max=120))
    # set from the uploaded file, never from input
    photo = fields.String(dump_only=True)

# fields open to JSON Patch
class ActorPatchSchema(ma.Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=120))
    date_of_birth = fields.Date(allow_none=True)

# instantiate
actor_schema = ActorSchema()
actors_schema = ActorSchema(many=True)
actor_patch_schema = ActorPatchSchema()
