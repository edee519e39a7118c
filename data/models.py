# Data models

class Item:
    """
    Represents a priced item in the shop.

    Items are created by ``data.repository.add_item`` (which assigns the ID)
    or rebuilt from the store by ``Item.from_dict``. Only ``name`` and
    ``price`` change after creation.
    """
    def __init__(self, id, name, price):
        self.id = id
        self.name = name.strip()
        self.price = price

    def to_dict(self):
        return {"id": self.id, "name": self.name, "price": self.price}

    @classmethod
    def from_dict(cls, data):
        return cls(data["id"], data["name"], data["price"])

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return (self.id, self.name, self.price) == (other.id, other.name, other.price)

    def __repr__(self):
        return f"Item(id={self.id}, name='{self.name}', price={self.price})"

if __name__ == "__main__":
    # Example usage
    item = Item(1, "  Croissant ", 2.5)
    print(item)
    print(item.to_dict())
