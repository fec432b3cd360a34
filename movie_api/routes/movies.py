import logging

from flask import Blueprint, url_for
from marshmallow import ValidationError
from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from movie_api.mapping import (
    apply_input_to_movie,
    assign_cast_order,
    merge_patch,
    movie_from_input,
    to_patch_document,
)
from movie_api.models import db
from movie_api.models.actor import Actor
from movie_api.models.genre import Genre
from movie_api.models.movie import Movie
from movie_api.models.movie_actor import MovieActor
from movie_api.models.movie_genre import MovieGenre
from movie_api.patching import apply_patch
from movie_api.routes.helpers import commit, read_patch_operations, read_payload
from movie_api.schemas.movie import movie_input_schema, movie_patch_schema, movie_schema
from movie_api.schemas.patch import patch_operations_schema
from movie_api.storage import get_file_store

logger = logging.getLogger(__name__)

# Blueprint gets inserted into flask app
movies_router = Blueprint('movies', __name__, url_prefix='/movies')

CONTAINER = "movies"
UNKNOWN_REFERENCE = "Movie references a genre or actor that does not exist."

def movie_to_hateoas(movie):
    return {
        **movie_schema.dump(movie),
        "_links": {
            "self": f"/api/movies/{movie.movie_id}",
            "update": f"/api/movies/{movie.movie_id}",
            "delete": f"/api/movies/{movie.movie_id}",
            "genres": [f"/api/genres/{g.genre_id}" for g in movie.movie_genres],
            "actors": [f"/api/actors/{a.actor_id}" for a in movie.movie_actors],
        }
    }

def check_references(movie_data):
    # unknown ids must fail before any poster reaches the file store
    errors = {}

    genre_ids = set(movie_data["genre_ids"])
    known = set(db.session.execute(select(Genre.genre_id).where(Genre.genre_id.in_(genre_ids))).scalars())
    if genre_ids - known:
        errors["genre_ids"] = [f"Unknown genre ids: {sorted(genre_ids - known)}."]

    actor_ids = {actor["actor_id"] for actor in movie_data["actors"]}
    known = set(db.session.execute(select(Actor.actor_id).where(Actor.actor_id.in_(actor_ids))).scalars())
    if actor_ids - known:
        errors["actors"] = [f"Unknown actor ids: {sorted(actor_ids - known)}."]

    if errors:
        raise ValidationError(errors)

def load_movie_payload():
    data, poster = read_payload("poster")
    movie_data = movie_input_schema.load(data)
    check_references(movie_data)
    return movie_data, poster

@movies_router.get("")
def read_all_movies():
    query = select(Movie).options(
        selectinload(Movie.movie_genres).selectinload(MovieGenre.genre),
        selectinload(Movie.movie_actors).selectinload(MovieActor.actor),
    )
    movies = db.session.execute(query).scalars().all()
    return [movie_to_hateoas(m) for m in movies]

@movies_router.get('/<int:movie_id>')
def read_movie(movie_id):
    movie = db.session.get(Movie, movie_id)
    if movie is None:
        return "", 404
    return movie_to_hateoas(movie)

@movies_router.post("")
def create_movie():
    try:
        movie_data, poster = load_movie_payload()
    except ValidationError as err:
        return {"error": err.messages}, 400

    movie = movie_from_input(movie_data)

    if poster is not None:
        movie.poster = get_file_store().store(poster.content, poster.extension, CONTAINER, poster.content_type)

    assign_cast_order(movie)
    db.session.add(movie)

    try:
        commit(CONTAINER, movie.poster)
    except IntegrityError:
        return {"error": UNKNOWN_REFERENCE}, 400

    logger.info("Created movie %s (%s)", movie.movie_id, movie.title)
    location = url_for(".read_movie", movie_id=movie.movie_id)
    return movie_to_hateoas(movie), 201, {"Location": location}

@movies_router.put("/<int:movie_id>")
def update_movie(movie_id):
    query = (
        select(Movie)
        .options(selectinload(Movie.movie_actors), selectinload(Movie.movie_genres))
        .filter_by(movie_id=movie_id)
    )
    movie = db.session.execute(query).scalar_one_or_none()
    if movie is None:
        return "", 404

    try:
        movie_data, poster = load_movie_payload()
    except ValidationError as err:
        return {"error": err.messages}, 400

    apply_input_to_movie(movie_data, movie)

    stored = None
    if poster is not None:
        stored = get_file_store().replace(
            poster.content, poster.extension, CONTAINER, movie.poster, poster.content_type
        )
        movie.poster = stored

    assign_cast_order(movie)

    try:
        commit(CONTAINER, stored)
    except IntegrityError:
        return {"error": UNKNOWN_REFERENCE}, 400

    logger.info("Replaced movie %s", movie_id)
    return "", 204

@movies_router.patch("/<int:movie_id>")
def partial_update_movie(movie_id):
    operations = read_patch_operations()
    if operations is None:
        return {"error": "A non-empty list of patch operations is required."}, 400

    movie = db.session.get(Movie, movie_id)
    if movie is None:
        return "", 404

    try:
        operations = patch_operations_schema.load(operations)
        patched = apply_patch(to_patch_document(movie_patch_schema, movie), operations)
        changes = movie_patch_schema.load(patched)
    except ValidationError as err:
        return {"error": err.messages}, 400

    merge_patch(changes, movie)
    db.session.commit()

    logger.info("Patched movie %s with %d operation(s)", movie_id, len(operations))
    return "", 204

@movies_router.delete('/<int:movie_id>')
def delete_movie(movie_id):
    found = db.session.scalar(select(exists().where(Movie.movie_id == movie_id)))
    if not found:
        return "", 404

    # delete by identity only, the poster blob is left in place
    db.session.execute(delete(MovieActor).where(MovieActor.movie_id == movie_id))
    db.session.execute(delete(MovieGenre).where(MovieGenre.movie_id == movie_id))
    db.session.execute(delete(Movie).where(Movie.movie_id == movie_id))
    db.session.commit()

    logger.info("Deleted movie %s", movie_id)
    return "", 204
