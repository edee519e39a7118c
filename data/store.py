# Record store: the whole item list as one JSON file

import json
import logging
import os

from data.exceptions import StorageReadError, StorageWriteError
from data.models import Item
from utils.helpers import is_valid_price

logger = logging.getLogger(__name__)

DATA_FILE = "bakery.json"

_FIELD_TYPES = {
    "id": (int,),
    "name": (str,),
    "price": (int, float),
}


def _item_from_record(record, index, path):
    if not isinstance(record, dict):
        raise StorageReadError(path, f"record {index} is not an object")
    for field, types in _FIELD_TYPES.items():
        if field not in record:
            raise StorageReadError(path, f"record {index} has no '{field}'")
        value = record[field]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, types):
            raise StorageReadError(path, f"record {index} has a bad '{field}': {value!r}")
    if record["id"] < 1:
        raise StorageReadError(path, f"record {index} has a non-positive id: {record['id']}")
    if not is_valid_price(record["price"]):
        raise StorageReadError(path, f"record {index} has an invalid price: {record['price']}")
    return Item(record["id"], record["name"], float(record["price"]))


def load(path=DATA_FILE):
    """
    Reads every item from the store, in stored order.

    A store that does not exist yet, or is empty, holds no items.
    Anything else that cannot be read back raises StorageReadError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        logger.debug("No store at %s yet, starting empty", path)
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        raise StorageReadError(path, str(e)) from e

    if not content.strip():
        return []

    try:
        records = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Corrupt store %s: %s", path, e)
        raise StorageReadError(path, f"invalid JSON ({e})") from e

    if not isinstance(records, list):
        raise StorageReadError(path, "top-level value is not a list")

    items = [_item_from_record(record, i, path) for i, record in enumerate(records)]
    logger.debug("Loaded %d item(s) from %s", len(items), path)
    return items


def save(items, path=DATA_FILE):
    """
    Replaces the whole store with ``items``, keeping their order.
    """
    payload = json.dumps([item.to_dict() for item in items], indent=2)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        logger.warning("Could not write %s: %s", path, e)
        raise StorageWriteError(path, str(e)) from e
    logger.info("Saved %d item(s) to %s", len(items), path)


def ensure_exists(path=DATA_FILE):
    """
    Creates an empty store if there is none at ``path``.
    """
    if os.path.exists(path):
        return
    save([], path)
