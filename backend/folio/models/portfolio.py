from folio.extensions import db
from .base import BaseModel


class Portfolio(BaseModel):
    __tablename__ = "portfolios"

    # one portfolio per user; the user itself lives with the session provider
    user_id = db.Column(db.String(36), unique=True, nullable=False, index=True)
    title = db.Column(db.String(100), nullable=False, default="My Portfolio")
    description = db.Column(db.Text, nullable=True)

    is_published = db.Column(db.Boolean, nullable=False, default=False)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    # Relationship to Sections (ordered, cascade deletes)
    sections = db.relationship(
        "Section",
        back_populates="portfolio",
        order_by="Section.position",
        cascade="all, delete-orphan",
    )
