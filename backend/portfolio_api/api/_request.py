import uuid

from flask import request

from portfolio_api.errors import ValidationError
from portfolio_api.utils.payload import require_json_object


def json_body():
    """Parsed JSON object body; an empty body reads as ``{}``."""
    data = request.get_json(silent=True)
    if data is None and request.get_data(cache=True):
        raise ValidationError("Request body must be valid JSON")
    return require_json_object(data)


def uuid_arg(name):
    value = request.args.get(name)
    if value is None or value == "":
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise ValidationError(f"'{name}' must be a UUID")
