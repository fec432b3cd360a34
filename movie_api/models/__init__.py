import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()

# sqlite ignores foreign keys unless asked per connection
@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

from movie_api.models.genre import Genre  # noqa: E402
from movie_api.models.actor import Actor  # noqa: E402
from movie_api.models.movie_genre import MovieGenre  # noqa: E402
from movie_api.models.movie_actor import MovieActor  # noqa: E402
from movie_api.models.movie import Movie  # noqa: E402
