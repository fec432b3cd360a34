from movie_api.models import db

class MovieActor(db.Model):
    movie_id = db.Column(db.Integer, db.ForeignKey("movie.movie_id", ondelete="CASCADE"), primary_key=True)
    actor_id = db.Column(db.Integer, db.ForeignKey("actor.actor_id", ondelete="CASCADE"), primary_key=True)
    character = db.Column(db.String(100))
    # position in the cast list, always re-derived by the server
    order = db.Column(db.Integer, nullable=False, default=0)

    movie = db.relationship("Movie", back_populates="movie_actors")
    actor = db.relationship("Actor")
