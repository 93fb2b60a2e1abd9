"""Record id helpers."""
from bson import ObjectId
from bson.errors import InvalidId

from app.errors import NotFoundError


def to_object_id(value: str, entity: str) -> ObjectId:
    """
    Parse a record id.

    Malformed ids can never match a record, so they are reported as the
    entity being not found.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise NotFoundError(entity)
