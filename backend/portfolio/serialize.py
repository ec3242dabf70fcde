# portfolio/serialize.py
from bson import ObjectId


def serialize_doc(doc):
    """Convert ObjectIds to strings and expose ``_id`` as ``id``."""
    if doc is None:
        return None
    out = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            value = str(value)
        if key == "_id":
            out["id"] = str(value)
        else:
            out[key] = value
    return out


def serialize_list(docs):
    return [serialize_doc(d) for d in docs]
