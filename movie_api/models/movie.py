from movie_api.models import db
from movie_api.models.movie_actor import MovieActor

class Movie(db.Model):
    movie_id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(300), nullable=False)
    release_date = db.Column(db.Date)
    summary = db.Column(db.Text)
    poster = db.Column(db.String(255))  # blob reference, set only after storage

    movie_actors = db.relationship(
        "MovieActor",
        back_populates="movie",
        cascade="all, delete-orphan",
        order_by=MovieActor.order,
    )
    movie_genres = db.relationship(
        "MovieGenre",
        back_populates="movie",
        cascade="all, delete-orphan",
    )
