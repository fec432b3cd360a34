import logging

from flask import Blueprint, url_for
from marshmallow import ValidationError
from sqlalchemy import delete, select

from movie_api.mapping import (
    actor_from_input,
    apply_input_to_actor,
    merge_patch,
    to_patch_document,
)
from movie_api.models import db
from movie_api.models.actor import Actor
from movie_api.models.movie import Movie
from movie_api.models.movie_actor import MovieActor
from movie_api.patching import apply_patch
from movie_api.routes.helpers import commit, read_patch_operations, read_payload
from movie_api.schemas.actor import actor_patch_schema, actor_schema
from movie_api.schemas.movie import movies_schema
from movie_api.schemas.patch import patch_operations_schema
from movie_api.storage import get_file_store

logger = logging.getLogger(__name__)

# Blueprint gets inserted into flask app
actors_router = Blueprint('actors', __name__, url_prefix='/actors')

CONTAINER = "actors"

def actor_to_hateoas(actor):
    return {
        **actor_schema.dump(actor),
        "_links": {
            "self": f"/api/actors/{actor.actor_id}",
            "update": f"/api/actors/{actor.actor_id}",
            "delete": f"/api/actors/{actor.actor_id}",
            "movies": f"/api/actors/{actor.actor_id}/movies"
        }
    }

def load_actor_payload():
    data, photo = read_payload("photo")
    return actor_schema.load(data), photo

@actors_router.get("")
def read_all_actors():
    actors = db.session.execute(select(Actor).order_by(Actor.name)).scalars().all()
    actor_items = [actor_to_hateoas(a) for a in actors]

    return {
        "count": len(actor_items),
        "items": actor_items,
        "_links": {
            "self": "/api/actors",
            "create": "/api/actors"
        }
    }

@actors_router.get("/<int:actor_id>")
def read_actor(actor_id):
    actor = db.session.get(Actor, actor_id)
    if actor is None:
        return "", 404
    return actor_to_hateoas(actor)

@actors_router.get("/<int:actor_id>/movies")
def read_actor_movies(actor_id):
    if db.session.get(Actor, actor_id) is None:
        return "", 404

    query = (
        select(Movie)
        .join(MovieActor)
        .where(MovieActor.actor_id == actor_id)
        .order_by(Movie.release_date)
    )
    return movies_schema.dump(db.session.execute(query).scalars().all()), 200

@actors_router.post("")
def create_actor():
    try:
        actor_data, photo = load_actor_payload()
    except ValidationError as err:
        return {"error": err.messages}, 400

    actor = actor_from_input(actor_data)
    if photo is not None:
        actor.photo = get_file_store().store(photo.content, photo.extension, CONTAINER, photo.content_type)

    db.session.add(actor)
    commit(CONTAINER, actor.photo)

    logger.info("Created actor %s (%s)", actor.actor_id, actor.name)
    location = url_for(".read_actor", actor_id=actor.actor_id)
    return actor_to_hateoas(actor), 201, {"Location": location}

@actors_router.put("/<int:actor_id>")
def update_actor(actor_id):
    actor = db.session.get(Actor, actor_id)
    if actor is None:
        return "", 404

    try:
        actor_data, photo = load_actor_payload()
    except ValidationError as err:
        return {"error": err.messages}, 400

    apply_input_to_actor(actor_data, actor)

    stored = None
    if photo is not None:
        stored = get_file_store().replace(
            photo.content, photo.extension, CONTAINER, actor.photo, photo.content_type
        )
        actor.photo = stored

    commit(CONTAINER, stored)
    return "", 204

@actors_router.patch("/<int:actor_id>")
def partial_update_actor(actor_id):
    operations = read_patch_operations()
    if operations is None:
        return {"error": "A non-empty list of patch operations is required."}, 400

    actor = db.session.get(Actor, actor_id) # retrieve actor object
    if actor is None:
        return "", 404

    try:
        operations = patch_operations_schema.load(operations)
        patched = apply_patch(to_patch_document(actor_patch_schema, actor), operations)
        changes = actor_patch_schema.load(patched)
    except ValidationError as err:
        return {"error": err.messages}, 400

    merge_patch(changes, actor)
    db.session.commit()
    return "", 204

@actors_router.delete("/<int:actor_id>")
def delete_actor(actor_id):
    actor = db.session.get(Actor, actor_id)
    if actor is None:
        return "", 404

    photo = actor.photo
    db.session.execute(delete(MovieActor).where(MovieActor.actor_id == actor_id))
    db.session.delete(actor)
    db.session.commit()

    get_file_store().delete(photo, CONTAINER)
    logger.info("Deleted actor %s", actor_id)
    return "", 204
