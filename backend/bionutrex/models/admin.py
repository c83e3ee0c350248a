from werkzeug.security import generate_password_hash, check_password_hash
from bionutrex.extensions import db
from .base import BaseModel


class Admin(BaseModel):
    __tablename__ = "admins"

    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
