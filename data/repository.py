# Data repository
#
# Every function works on a list of Items loaded by data.store; the caller
# decides when to save it back.

from data.exceptions import (
    DuplicateNameError,
    EmptyNameError,
    InvalidPriceError,
    ItemNotFoundError,
)
from data.models import Item
from utils.helpers import is_valid_price, parse_int


def next_id(items):
    """
    Returns one more than the highest ID in ``items``, or 1 for an empty list.
    """
    return max((item.id for item in items), default=0) + 1


def check_new_name(items, name):
    """
    Returns the trimmed name if a new item may use it.
    """
    name = name.strip()
    if not name:
        raise EmptyNameError()
    if any(item.name.casefold() == name.casefold() for item in items):
        raise DuplicateNameError(name)
    return name


def add_item(items, name, price):
    """
    Adds a new item with the next free ID and returns it.

    Names are trimmed and must be unique ignoring case. ``items`` is left
    untouched if any check fails.
    """
    name = check_new_name(items, name)
    if not is_valid_price(price):
        raise InvalidPriceError(price)

    item = Item(next_id(items), name, price)
    items.append(item)
    return item


def get_item(items, item_id):
    """
    Retrieves an item by its ID, or None.
    """
    for item in items:
        if item.id == item_id:
            return item
    return None


def find_by_id(items, item_id):
    item = get_item(items, item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


def find_by_name_or_id(items, token):
    """
    Returns every item whose ID equals ``token`` (when it is a whole number)
    or whose name equals it ignoring case.
    """
    token = token.strip()
    item_id = parse_int(token)
    if item_id is not None:
        return [item for item in items if item.id == item_id]
    return [item for item in items if item.name.casefold() == token.casefold()]


def update_item(items, item_id, new_name=None, new_price=None):
    """
    Changes the name and/or price of an existing item and returns it.

    A blank ``new_name`` keeps the current name. A negative or non-finite
    ``new_price`` keeps the current price; the name change still applies.
    Names are not checked for duplicates here.
    """
    item = find_by_id(items, item_id)
    if new_name is not None and new_name.strip():
        item.name = new_name.strip()
    if new_price is not None and is_valid_price(new_price):
        item.price = new_price
    return item


def remove_item(items, item_id):
    """
    Removes the item with ``item_id``. Returns whether anything was removed.
    """
    kept = [item for item in items if item.id != item_id]
    if len(kept) == len(items):
        return False
    items[:] = kept
    return True
