# entity <-> input mapping; poster and photo are set by the routes after storage
import logging

from movie_api.models.actor import Actor
from movie_api.models.movie import Movie
from movie_api.models.movie_actor import MovieActor
from movie_api.models.movie_genre import MovieGenre

logger = logging.getLogger(__name__)

MOVIE_FIELDS = ("title", "release_date", "summary")
ACTOR_FIELDS = ("name", "date_of_birth")


def build_movie_genres(genre_ids):
    # existence of each genre is left to the foreign key
    return [MovieGenre(genre_id=genre_id) for genre_id in genre_ids or []]


def build_movie_actors(actors):
    # order is assigned later by assign_cast_order
    return [
        MovieActor(actor_id=actor["actor_id"], character=actor.get("character"))
        for actor in actors or []
    ]


def movie_from_input(data):
    movie = Movie(**{field: data.get(field) for field in MOVIE_FIELDS})
    movie.movie_genres = build_movie_genres(data.get("genre_ids"))
    movie.movie_actors = build_movie_actors(data.get("actors"))
    return movie


def assign_cast_order(movie):
    """Number the cast 0..n-1 following the collection's current sequence."""
    if movie.movie_actors is None:
        return
    for index, movie_actor in enumerate(movie.movie_actors):
        movie_actor.order = index


def replace_movie_genres(movie, genre_ids):
    genre_ids = list(genre_ids or [])
    existing = {movie_genre.genre_id: movie_genre for movie_genre in movie.movie_genres}

    removed = set(existing) - set(genre_ids)
    added = [genre_id for genre_id in genre_ids if genre_id not in existing]
    logger.debug("Movie %s genres: +%s -%s", movie.movie_id, added, sorted(removed))

    # rows dropped from the collection are deleted as orphans
    movie.movie_genres = [
        existing.get(genre_id) or MovieGenre(genre_id=genre_id)
        for genre_id in genre_ids
    ]


def replace_movie_actors(movie, actors):
    actors = list(actors or [])
    existing = {movie_actor.actor_id: movie_actor for movie_actor in movie.movie_actors}

    cast = []
    for actor in actors:
        movie_actor = existing.get(actor["actor_id"])
        if movie_actor is None:
            movie_actor = MovieActor(actor_id=actor["actor_id"])
        movie_actor.character = actor.get("character")
        cast.append(movie_actor)

    removed = set(existing) - {actor["actor_id"] for actor in actors}
    logger.debug("Movie %s cast: %d kept or added, %d removed", movie.movie_id, len(cast), len(removed))
    movie.movie_actors = cast


def apply_input_to_movie(data, movie):
    """Overwrite a loaded movie with a full input, keeping its identity."""
    for field in MOVIE_FIELDS:
        setattr(movie, field, data.get(field))
    replace_movie_genres(movie, data.get("genre_ids"))
    replace_movie_actors(movie, data.get("actors"))
    return movie


def to_patch_document(patch_schema, entity):
    return patch_schema.dump(entity)


def merge_patch(changes, entity):
    # changes come from a patch schema load, so only patchable fields exist
    for field, value in changes.items():
        if hasattr(entity, field):
            setattr(entity, field, value)
    return entity


def actor_from_input(data):
    return Actor(**{field: data.get(field) for field in ACTOR_FIELDS})


def apply_input_to_actor(data, actor):
    for field in ACTOR_FIELDS:
        setattr(actor, field, data.get(field))
    return actor
