from movie_api.models.genre import Genre
from movie_api.schemas import ma
from marshmallow import EXCLUDE, fields, validate

class GenreSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Genre
        unknown = EXCLUDE

    genre_id = fields.Int(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1, max=40))

genre_schema = GenreSchema()
genres_schema = GenreSchema(many=True)
