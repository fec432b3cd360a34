from movie_api.models.movie import Movie
from movie_api.schemas import ma
from movie_api.schemas.fields import FormJSON
from marshmallow import EXCLUDE, fields, validate, validates_schema, ValidationError

# nested read shapes for the association rows
class MovieGenreSchema(ma.Schema):
    genre_id = fields.Int()
    name = fields.Function(lambda movie_genre: movie_genre.genre.name if movie_genre.genre else None)

class MovieActorSchema(ma.Schema):
    actor_id = fields.Int()
    name = fields.Function(lambda movie_actor: movie_actor.actor.name if movie_actor.actor else None)
    character = fields.String()
    order = fields.Int()

class MovieSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Movie

    movie_id = fields.Int(dump_only=True)
    poster = fields.String(dump_only=True)

    genres = fields.Nested(MovieGenreSchema, many=True, attribute="movie_genres", dump_only=True)
    actors = fields.Nested(MovieActorSchema, many=True, attribute="movie_actors", dump_only=True)

class MovieActorInputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    actor_id = fields.Int(required=True)
    character = fields.String(allow_none=True, validate=validate.Length(max=100))

# create / full replace input, poster travels separately as a file
class MovieInputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1, max=300))
    release_date = fields.Date(allow_none=True)
    summary = fields.String(allow_none=True)

    genre_ids = FormJSON(fields.List(fields.Int()), load_default=list)
    actors = FormJSON(fields.List(fields.Nested(MovieActorInputSchema)), load_default=list)

    @validates_schema
    def validate_unique_associations(self, data, **kwargs):
        genre_ids = data.get("genre_ids") or []
        if len(set(genre_ids)) != len(genre_ids):
            raise ValidationError("Duplicate genre ids.", "genre_ids")

        actor_ids = [actor["actor_id"] for actor in data.get("actors") or []]
        if len(set(actor_ids)) != len(actor_ids):
            raise ValidationError("Duplicate actor ids.", "actors")

# fields open to JSON Patch
class MoviePatchSchema(ma.Schema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=300))
    release_date = fields.Date(allow_none=True)
    summary = fields.String(allow_none=True)


movie_schema = MovieSchema()
movies_schema = MovieSchema(many=True)
movie_input_schema = MovieInputSchema()
movie_patch_schema = MoviePatchSchema()
