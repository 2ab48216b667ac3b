import os

from portfolio_api import create_app

app = create_app(os.getenv("APP_ENV", "production"))
