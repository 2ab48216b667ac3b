from portfolio_api.extensions import db
from .base import BaseModel


class Section(BaseModel):
    __tablename__ = "sections"

    site_id = db.Column(
        db.String(36),
        db.ForeignKey("sites.id", ondelete="CASCADE"),
        nullable=False
    )
    section_key = db.Column(db.String(100), nullable=False)  # about, projects, talks
    title = db.Column(db.String(200), nullable=False)
    icon = db.Column(db.String(100), nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    site = db.relationship("Site", back_populates="sections")
    items = db.relationship(
        "Item",
        back_populates="section",
        order_by="Item.sort_order",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.UniqueConstraint("site_id", "section_key", name="uq_section_key_per_site"),
    )
