# Business services
#
# Each service loads the store, works on that snapshot and saves it back only
# when something changed. Message-returning services never raise for
# inventory errors; they report them in the returned text.

import logging

from data import store
from data.exceptions import InventoryError
from data.repository import (
    add_item as repo_add_item,
    check_new_name as repo_check_new_name,
    find_by_name_or_id as repo_find_by_name_or_id,
    get_item as repo_get_item,
    remove_item as repo_remove_item,
    update_item as repo_update_item,
)
from logic.billing import BillingSession, run_billing

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


def _error(e):
    return f"{ERROR_PREFIX}{e}"


def create_item_service(name, price, path=store.DATA_FILE):
    """
    Service to create a new item.
    It loads the store, adds the item via the repository and saves the result.
    """
    try:
        items = store.load(path)
        item = repo_add_item(items, name, price)
        store.save(items, path)
    except InventoryError as e:
        logger.warning("Add rejected for %r: %s", name, e)
        return _error(e)
    logger.info("Added %r", item)
    return f"Item '{item.name}' added successfully! ID: {item.id}"


def check_item_name_service(name, path=store.DATA_FILE):
    """
    Checks whether a new item may be called ``name`` before its price is asked.
    Returns an error message, or None when the name is free.
    """
    try:
        repo_check_new_name(store.load(path), name)
    except InventoryError as e:
        return _error(e)
    return None


def list_items_service(path=store.DATA_FILE):
    return store.load(path)


def get_item_service(item_id, path=store.DATA_FILE):
    """
    Service to retrieve an item. Returns None when there is no such item.
    """
    return repo_get_item(store.load(path), item_id)


def search_items_service(token, path=store.DATA_FILE):
    return repo_find_by_name_or_id(store.load(path), token)


def update_item_service(item_id, new_name=None, new_price=None, path=store.DATA_FILE):
    """
    Service to rename and/or reprice an item.

    A price that cannot be applied is reported, but the rest of the update
    is still saved.
    """
    try:
        items = store.load(path)
        item = repo_update_item(items, item_id, new_name, new_price)
        store.save(items, path)
    except InventoryError as e:
        logger.warning("Update of item %s rejected: %s", item_id, e)
        return _error(e)

    logger.info("Updated %r", item)
    message = f"Item {item.id} updated successfully!"
    if new_price is not None and item.price != new_price:
        if new_price < 0:
            message += " Price cannot be negative, keeping old price."
        else:
            message += " Invalid price, keeping old price."
    return message


def delete_item_service(item_id, path=store.DATA_FILE):
    try:
        items = store.load(path)
        if not repo_remove_item(items, item_id):
            return f"{ERROR_PREFIX}Item ID {item_id} not found!"
        store.save(items, path)
    except InventoryError as e:
        logger.warning("Delete of item %s rejected: %s", item_id, e)
        return _error(e)
    logger.info("Deleted item %s", item_id)
    return f"Item {item_id} deleted successfully!"


def start_billing_service(path=store.DATA_FILE):
    """
    Opens a billing session over the items currently in the store.
    """
    return BillingSession(store.load(path))


def run_billing_service(picks, path=store.DATA_FILE):
    """
    Bills a whole sequence of (item ID, quantity) picks and returns the total.
    """
    picks = list(picks)
    total = run_billing(store.load(path), picks)
    logger.info("Billed %d pick(s), total %.2f", len(picks), total)
    return total
