from bionutrex.extensions import db
from .base import BaseModel


class BlogPost(BaseModel):
    __tablename__ = "blog_posts"

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    excerpt = db.Column(db.Text, nullable=False, default="")
    content = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(512), nullable=True)
    author = db.Column(db.String(255), nullable=False)
    published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)
    views = db.Column(db.Integer, nullable=False, default=0)
