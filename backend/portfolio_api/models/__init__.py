from .base import BaseModel
from .site import Site
from .cta import Cta
from .section import Section
from .item import Item

__all__ = ["BaseModel", "Site", "Cta", "Section", "Item"]
