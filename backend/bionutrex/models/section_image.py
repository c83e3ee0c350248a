from bionutrex.extensions import db
from .base import BaseModel


class SectionImage(BaseModel):
    __tablename__ = "section_images"

    section_id = db.Column(
        db.String(36),
        db.ForeignKey("home_sections.id", ondelete="CASCADE"),
        nullable=False,
    )
    url = db.Column(db.String(512), nullable=False)
    alt = db.Column(db.String(255), nullable=False, default="")
    caption = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("HomeSection", back_populates="images")

    __table_args__ = (
        db.Index("idx_section_image_section_order", "section_id", "order"),
    )
