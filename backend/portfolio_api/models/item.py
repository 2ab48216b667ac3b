from portfolio_api.extensions import db
from .base import BaseModel


class Item(BaseModel):
    __tablename__ = "items"

    section_id = db.Column(
        db.String(36),
        db.ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    href = db.Column(db.String(500), nullable=True)
    meta = db.Column(db.String(200), nullable=True)  # e.g. "2023 · Python"
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="items")
