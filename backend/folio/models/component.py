from folio.extensions import db
from .base import BaseModel
from .positioned import PositionedMixin


class Component(BaseModel, PositionedMixin):
    __tablename__ = "components"
    __scope__ = "section_id"

    section_id = db.Column(
        db.String(36),
        db.ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type = db.Column(db.String(50), nullable=False)  # text, cards, pills, social_links, ...
    data = db.Column(db.JSON, nullable=False, default=dict)

    # Relationship to parent Section
    section = db.relationship("Section", back_populates="components")

    __table_args__ = (
        db.Index("idx_component_section_position", "section_id", "position"),
    )
