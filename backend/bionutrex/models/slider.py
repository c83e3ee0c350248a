from bionutrex.extensions import db
from .base import BaseModel


class Slider(BaseModel):
    __tablename__ = "sliders"

    title = db.Column(db.String(255), nullable=False)
    subtitle = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    button_text = db.Column(db.String(120), nullable=True)
    button_link = db.Column(db.String(512), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True, index=True)
