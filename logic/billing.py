# Billing

import logging

from data.exceptions import BillingClosedError, ItemNotFoundError, NegativeQuantityError
from data.repository import find_by_id

logger = logging.getLogger(__name__)


def apply_pick(items, item_id, quantity):
    """
    Returns the amount one pick adds to a bill: the item's price times
    ``quantity``.
    """
    item = find_by_id(items, item_id)
    if quantity < 0:
        raise NegativeQuantityError(quantity)
    return item.price * quantity


class BillLine:
    def __init__(self, item, quantity, amount):
        self.item = item
        self.quantity = quantity
        self.amount = amount

    def __repr__(self):
        return f"BillLine(item_id={self.item.id}, quantity={self.quantity}, amount={self.amount})"


class BillingSession:
    """
    A running bill over a fixed snapshot of items.

    The session is open until ``close`` is called. A failed pick raises and
    leaves the total as it was, so the caller can simply ask for the next one.
    """

    def __init__(self, items):
        self.items = list(items)
        self.lines = []
        self.total = 0.0
        self.closed = False

    def item(self, item_id):
        return find_by_id(self.items, item_id)

    def pick(self, item_id, quantity):
        if self.closed:
            raise BillingClosedError()
        amount = apply_pick(self.items, item_id, quantity)
        line = BillLine(self.item(item_id), quantity, amount)
        self.lines.append(line)
        self.total += amount
        return line

    def close(self):
        self.closed = True
        return self.total


def run_billing(items, picks):
    """
    Bills a sequence of (item ID, quantity) picks and returns the total.
    Picks for unknown items or with negative quantities are skipped.
    """
    session = BillingSession(items)
    for item_id, quantity in picks:
        try:
            session.pick(item_id, quantity)
        except (ItemNotFoundError, NegativeQuantityError) as e:
            logger.warning("Skipping pick (%s, %s): %s", item_id, quantity, e)
    return session.close()
