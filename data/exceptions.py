# Inventory errors


class InventoryError(Exception):
    """
    Base class for every error raised by the inventory and billing code.
    """


class EmptyNameError(InventoryError, ValueError):
    def __init__(self):
        super().__init__("Item name cannot be empty!")


class DuplicateNameError(InventoryError, ValueError):
    def __init__(self, name):
        super().__init__(f"Item '{name}' already exists!")
        self.name = name


class InvalidPriceError(InventoryError, ValueError):
    def __init__(self, price):
        if price < 0:
            super().__init__("Price cannot be negative!")
        else:
            super().__init__(f"Invalid price: {price}.")
        self.price = price


class NegativeQuantityError(InventoryError, ValueError):
    def __init__(self, quantity):
        super().__init__("Quantity cannot be negative!")
        self.quantity = quantity


class InvalidInputError(InventoryError, ValueError):
    """
    Raised when a numeric field typed by the user cannot be parsed.
    """
    def __init__(self, field, raw_value):
        super().__init__(f"Invalid {field}: '{raw_value}'.")
        self.field = field
        self.raw_value = raw_value


class ItemNotFoundError(InventoryError, LookupError):
    def __init__(self, item_id):
        super().__init__(f"Item ID {item_id} not found!")
        self.item_id = item_id


class BillingClosedError(InventoryError):
    def __init__(self):
        super().__init__("Billing session is already closed.")


class StorageError(InventoryError):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass
