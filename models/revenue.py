from models import db

class Revenue(db.Model):
    __tablename__ = 'revenue'
    month = db.Column(db.String(4), primary_key=True)
    revenue = db.Column(db.Integer, nullable=False)
