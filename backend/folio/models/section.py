from folio.extensions import db
from .base import BaseModel
from .positioned import PositionedMixin


class Section(BaseModel, PositionedMixin):
    __tablename__ = "sections"
    __scope__ = "portfolio_id"

    portfolio_id = db.Column(
        db.String(36),
        db.ForeignKey("portfolios.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(150), nullable=False)
    visible = db.Column(db.Boolean, nullable=False, default=True)

    portfolio = db.relationship("Portfolio", back_populates="sections")
    components = db.relationship(
        "Component",
        back_populates="section",
        order_by="Component.position",
        cascade="all, delete-orphan",
    )

    # No unique constraint on (portfolio_id, position): sibling shifts run as a
    # single UPDATE and would trip a non-deferred constraint row by row.
    __table_args__ = (
        db.Index("idx_section_portfolio_position", "portfolio_id", "position"),
    )
