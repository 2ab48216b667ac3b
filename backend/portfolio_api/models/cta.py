from portfolio_api.extensions import db
from .base import BaseModel


class Cta(BaseModel):
    __tablename__ = "ctas"

    site_id = db.Column(
        db.String(36),
        db.ForeignKey("sites.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    label = db.Column(db.String(200), nullable=False)
    href = db.Column(db.String(500), nullable=False)
    icon = db.Column(db.String(100), nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    site = db.relationship("Site", back_populates="ctas")
