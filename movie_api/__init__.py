"""Movie catalog REST API: movies, genres, actors and poster uploads."""
import logging

from flask import Flask
from werkzeug.exceptions import HTTPException, InternalServerError

from movie_api.config import config
from movie_api.logger import configure_logging
from movie_api.models import db
from movie_api.schemas import ma

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    @app.errorhandler(InternalServerError)
    def handle_server_error(err):
        logger.error("Unhandled error", exc_info=err.original_exception or err)
        return {"error": "Internal server error"}, 500

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return {"error": err.description}, err.code


def create_app(config_object=config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    db.init_app(app)
    ma.init_app(app)

    from movie_api.routes import routes
    from movie_api.routes.uploads import uploads_router

    app.register_blueprint(routes)
    app.register_blueprint(uploads_router)
    register_error_handlers(app)

    with app.app_context():
        db.create_all()

    logger.info("Movie API ready (%s)", app.config["SQLALCHEMY_DATABASE_URI"])
    return app
