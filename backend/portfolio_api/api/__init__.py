from flask import Blueprint

# Portfolio content API, mounted under /api
api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import portfolio
from . import sections
from . import items
