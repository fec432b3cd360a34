from movie_api.models import db

class MovieGenre(db.Model):
    movie_id = db.Column(db.Integer, db.ForeignKey("movie.movie_id", ondelete="CASCADE"), primary_key=True)
    genre_id = db.Column(db.Integer, db.ForeignKey("genre.genre_id", ondelete="CASCADE"), primary_key=True)

    movie = db.relationship("Movie", back_populates="movie_genres")
    genre = db.relationship("Genre")
