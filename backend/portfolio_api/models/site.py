from portfolio_api.extensions import db
from .base import BaseModel


class Site(BaseModel):
    __tablename__ = "sites"

    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    tagline = db.Column(db.String(500), nullable=True)
    email = db.Column(db.String(320), nullable=True)
    location = db.Column(db.String(200), nullable=True)
    linkedin = db.Column(db.String(500), nullable=True)
    github = db.Column(db.String(500), nullable=True)
    hero_headline = db.Column(db.String(500), nullable=True)
    hero_subhead = db.Column(db.Text, nullable=True)

    # Owned rows go with the site
    ctas = db.relationship(
        "Cta",
        back_populates="site",
        order_by="Cta.sort_order",
        cascade="all, delete-orphan"
    )
    sections = db.relationship(
        "Section",
        back_populates="site",
        order_by="Section.sort_order",
        cascade="all, delete-orphan"
    )
