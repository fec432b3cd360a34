from flask import Blueprint

from movie_api.routes.actors import actors_router
from movie_api.routes.genres import genres_router
from movie_api.routes.movies import movies_router

routes = Blueprint('api', __name__, url_prefix='/api')

routes.register_blueprint(actors_router)
routes.register_blueprint(genres_router)
routes.register_blueprint(movies_router)
