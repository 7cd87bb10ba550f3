import uuid

from flask_login import UserMixin
from werkzeug.security import check_password_hash
from models import db

# نموذج المستخدم
class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.Text, unique=True, nullable=False)
    password_hash = db.Column('password', db.Text, nullable=False)

    def __repr__(self):
        return f'<User {self.email}>'

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
