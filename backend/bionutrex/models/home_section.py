from bionutrex.extensions import db
from .base import BaseModel


class HomeSection(BaseModel):
    __tablename__ = "home_sections"

    section_key = db.Column(db.String(100), unique=True, nullable=False, index=True)  # hero, quality, blog
    title = db.Column(db.String(255), nullable=False)
    subtitle = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=False, default="")
    image_url = db.Column(db.String(512), nullable=True)
    button_text = db.Column(db.String(120), nullable=True)
    button_link = db.Column(db.String(512), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    # Gallery images (ordered, cascade deletes)
    images = db.relationship(
        "SectionImage",
        back_populates="section",
        order_by="SectionImage.order",
        cascade="all, delete-orphan",
    )
