import os
import tempfile
import unittest
from data import store
from data.exceptions import StorageReadError
from data.models import Item
from logic.services import (
    ERROR_PREFIX,
    check_item_name_service,
    create_item_service,
    delete_item_service,
    get_item_service,
    list_items_service,
    run_billing_service,
    search_items_service,
    start_billing_service,
    update_item_service,
)

class TestServices(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "bakery.json")

    def tearDown(self):
        self.tmp.cleanup()

    def stored(self):
        return store.load(self.path)

    def test_create_item_saves_it(self):
        message = create_item_service("Bun", 1.5, self.path)
        self.assertEqual(message, "Item 'Bun' added successfully! ID: 1")
        self.assertEqual(self.stored(), [Item(1, "Bun", 1.5)])

    def test_create_duplicate_reports_error_and_keeps_store(self):
        create_item_service("Croissant", 2.5, self.path)
        message = create_item_service("croissant", 3.0, self.path)
        self.assertTrue(message.startswith(ERROR_PREFIX))
        self.assertIn("already exists", message)
        self.assertEqual(self.stored(), [Item(1, "Croissant", 2.5)])

    def test_create_invalid_item_does_not_create_store(self):
        self.assertTrue(create_item_service("", 1.0, self.path).startswith(ERROR_PREFIX))
        self.assertTrue(create_item_service("Bread", -1.0, self.path).startswith(ERROR_PREFIX))
        self.assertFalse(os.path.exists(self.path))

    def test_create_with_corrupt_store_reports_error(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{broken")
        message = create_item_service("Bun", 1.5, self.path)
        self.assertTrue(message.startswith(ERROR_PREFIX))
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "{broken")

    def test_check_item_name(self):
        create_item_service("Croissant", 2.5, self.path)
        self.assertIsNone(check_item_name_service("Bun", self.path))
        self.assertIn("cannot be empty", check_item_name_service("  ", self.path))
        self.assertIn("already exists", check_item_name_service(" CROISSANT ", self.path))

    def test_list_get_and_search(self):
        create_item_service("Bun", 1.5, self.path)
        create_item_service("Cake", 10.0, self.path)
        self.assertEqual([i.name for i in list_items_service(self.path)], ["Bun", "Cake"])
        self.assertEqual(get_item_service(2, self.path).name, "Cake")
        self.assertIsNone(get_item_service(3, self.path))
        self.assertEqual(search_items_service("cake", self.path)[0].id, 2)
        self.assertEqual(search_items_service("1", self.path)[0].name, "Bun")

    def test_update_item(self):
        create_item_service("Bun", 1.5, self.path)
        message = update_item_service(1, "Roll", 2.0, self.path)
        self.assertEqual(message, "Item 1 updated successfully!")
        self.assertEqual(self.stored(), [Item(1, "Roll", 2.0)])

    def test_update_negative_price_still_saves_name(self):
        create_item_service("Bun", 1.5, self.path)
        message = update_item_service(1, "Roll", -5, self.path)
        self.assertIn("keeping old price", message)
        self.assertEqual(self.stored(), [Item(1, "Roll", 1.5)])

    def test_update_missing_item(self):
        create_item_service("Bun", 1.5, self.path)
        message = update_item_service(9, "Roll", 2.0, self.path)
        self.assertTrue(message.startswith(ERROR_PREFIX))
        self.assertEqual(self.stored(), [Item(1, "Bun", 1.5)])

    def test_delete_item(self):
        create_item_service("Bun", 1.5, self.path)
        create_item_service("Cake", 10.0, self.path)
        self.assertEqual(delete_item_service(1, self.path), "Item 1 deleted successfully!")
        self.assertEqual(self.stored(), [Item(2, "Cake", 10.0)])
        self.assertEqual(create_item_service("Pie", 4.0, self.path), "Item 'Pie' added successfully! ID: 3")

    def test_delete_missing_item(self):
        create_item_service("Bun", 1.5, self.path)
        self.assertTrue(delete_item_service(5, self.path).startswith(ERROR_PREFIX))
        self.assertEqual(len(self.stored()), 1)

    def test_invalid_stored_price_is_not_billed(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write('[{"id": 1, "name": "Bun", "price": NaN}]')
        with self.assertRaises(StorageReadError):
            run_billing_service([(1, 2)], self.path)

    def test_run_billing(self):
        store.save([Item(1, "Bun", 1.50), Item(2, "Cake", 10.00)], self.path)
        total = run_billing_service([(1, 3), (2, 1), (99, 1), (1, -1)], self.path)
        self.assertAlmostEqual(total, 14.50)

    def test_start_billing_on_empty_store(self):
        self.assertEqual(start_billing_service(self.path).items, [])

if __name__ == "__main__":
    unittest.main()
