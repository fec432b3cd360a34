from movie_api.models import db

class Actor(db.Model):
    actor_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    date_of_birth = db.Column(db.Date)
    photo = db.Column(db.String(255))  # blob reference from the file store
