from .update_site import update_site
from .create_section import create_section
from .update_section import update_section
from .delete_section import delete_section
from .create_item import create_item
from .update_item import update_item
from .delete_item import delete_item

__all__ = [
    "update_site",
    "create_section",
    "update_section",
    "delete_section",
    "create_item",
    "update_item",
    "delete_item",
]
