import datetime as dt
from types import SimpleNamespace

import pytest

from movie_api import create_app
from movie_api.config import TestConfig
from movie_api.models import db
from movie_api.models.actor import Actor
from movie_api.models.genre import Genre


@pytest.fixture
def upload_folder(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_folder):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(upload_folder)

    app = create_app(Config)
    yield app

    with app.app_context():
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    """Three genres and three actors, ids exposed by name."""
    with app.app_context():
        drama, scifi, thriller = Genre(name="Drama"), Genre(name="Sci-Fi"), Genre(name="Thriller")
        dicaprio = Actor(name="Leonardo DiCaprio", date_of_birth=dt.date(1974, 11, 11))
        gordon_levitt = Actor(name="Joseph Gordon-Levitt", date_of_birth=dt.date(1981, 2, 17))
        page = Actor(name="Elliot Page", date_of_birth=dt.date(1987, 2, 21))
        db.session.add_all([drama, scifi, thriller, dicaprio, gordon_levitt, page])
        db.session.commit()

        return SimpleNamespace(
            drama=drama.genre_id,
            scifi=scifi.genre_id,
            thriller=thriller.genre_id,
            dicaprio=dicaprio.actor_id,
            gordon_levitt=gordon_levitt.actor_id,
            page=page.actor_id,
        )
