import logging

from flask import Blueprint, request
from marshmallow import ValidationError
from sqlalchemy import delete, select

from movie_api.models import db
from movie_api.models.genre import Genre
from movie_api.models.movie_genre import MovieGenre
from movie_api.schemas.genre import genre_schema, genres_schema

logger = logging.getLogger(__name__)

genres_router = Blueprint("genres", __name__, url_prefix="/genres")

@genres_router.get("")
def read_all_genres():
    genres = db.session.execute(select(Genre).order_by(Genre.name)).scalars().all()
    return genres_schema.dump(genres)

@genres_router.get("/<int:genre_id>")
def read_genre(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        return "", 404
    return genre_schema.dump(genre)

@genres_router.post("")
def create_genre():
    try:
        genre_data = genre_schema.load(request.get_json())
    except ValidationError as err:
        return {"error": err.messages}, 400

    genre = Genre(**genre_data)
    db.session.add(genre)
    db.session.commit()

    logger.info("Created genre %s (%s)", genre.genre_id, genre.name)
    return genre_schema.dump(genre), 201, {"Location": f"/api/genres/{genre.genre_id}"}

@genres_router.put("/<int:genre_id>")
def update_genre(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        return "", 404

    try:
        genre_data = genre_schema.load(request.get_json())
    except ValidationError as err:
        return {"error": err.messages}, 400

    genre.name = genre_data["name"]
    db.session.commit()
    return "", 204

@genres_router.delete("/<int:genre_id>")
def delete_genre(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        return "", 404

    db.session.execute(delete(MovieGenre).where(MovieGenre.genre_id == genre_id))
    db.session.delete(genre)
    db.session.commit()

    logger.info("Deleted genre %s", genre_id)
    return "", 204
