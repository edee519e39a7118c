# Command-line interface

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from data.exceptions import (
    InvalidInputError,
    ItemNotFoundError,
    NegativeQuantityError,
    StorageError,
)
from data.store import DATA_FILE
from logic.services import (
    ERROR_PREFIX,
    check_item_name_service,
    create_item_service,
    delete_item_service,
    get_item_service,
    list_items_service,
    search_items_service,
    start_billing_service,
    update_item_service,
)
from utils.helpers import format_price, parse_float, parse_int

FINISH_BILLING_ID = 0
EXIT_CHOICE = 7

MENU_OPTIONS = [
    (1, "Add Item"),
    (2, "Display Items"),
    (3, "Search Item"),
    (4, "Update Item"),
    (5, "Delete Item"),
    (6, "Billing"),
    (EXIT_CHOICE, "Exit"),
]

THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "header": "bold blue",
    }
)

console = Console(theme=THEME)


def say(message, style="info"):
    # Item names are user text, never markup.
    console.print(Text(str(message), style=style))


def report(message):
    """
    Prints a service message, styled by whether it reports an error.
    """
    say(message, "error" if message.startswith(ERROR_PREFIX) else "success")


def ask(message):
    return Prompt.ask(message, console=console).strip()


def ask_int(message, field):
    """
    Asks for a whole number; raises InvalidInputError if the answer is not one.
    """
    raw = ask(message)
    value = parse_int(raw)
    if value is None:
        raise InvalidInputError(field, raw)
    return value


def print_menu():
    lines = "\n".join(f"{number}. {label}" for number, label in MENU_OPTIONS)
    console.print(Panel(lines, title="Bakery Management System", style="header", expand=False))


def show_items(items):
    table = Table(title="Bakery Items", header_style="header")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    for item in items:
        table.add_row(str(item.id), Text(item.name), format_price(item.price))
    console.print(table)


def add_item(path=DATA_FILE):
    name = ask("Enter item name")
    error = check_item_name_service(name, path)
    if error:
        report(error)
        return
    raw_price = ask("Enter item price")
    price = parse_float(raw_price)
    if price is None:
        say(InvalidInputError("price", raw_price), "error")
        return
    report(create_item_service(name, price, path))


def display_items(path=DATA_FILE):
    items = list_items_service(path)
    if not items:
        say("No items found!", "warning")
        return
    show_items(items)


def search_item(path=DATA_FILE):
    token = ask("Enter item name or ID to search")
    matches = search_items_service(token, path)
    if not matches:
        say("Item not found!", "warning")
        return
    for item in matches:
        say(f"Item Found: {item.id} | {item.name} | {format_price(item.price)}", "success")


def update_item(path=DATA_FILE):
    item_id = ask_int("Enter item ID to update", "item ID")
    if get_item_service(item_id, path) is None:
        say(ItemNotFoundError(item_id), "error")
        return

    new_name = ask("Enter new name (blank to keep)")
    raw_price = ask("Enter new price (blank to keep)")
    new_price = None
    if raw_price:
        new_price = parse_float(raw_price)
        if new_price is None:
            say("Invalid price, keeping old price.", "warning")
    report(update_item_service(item_id, new_name, new_price, path))


def delete_item(path=DATA_FILE):
    item_id = ask_int("Enter item ID to delete", "item ID")
    report(delete_item_service(item_id, path))


def billing(path=DATA_FILE):
    """
    Runs an interactive bill until the user enters the finish ID.
    """
    session = start_billing_service(path)
    if not session.items:
        say("No items available for billing!", "warning")
        return

    show_items(session.items)
    while True:
        try:
            item_id = ask_int(f"Enter item ID to buy ({FINISH_BILLING_ID} to finish)", "item ID")
        except InvalidInputError as e:
            say(e, "error")
            continue
        if item_id == FINISH_BILLING_ID:
            break

        try:
            item = session.item(item_id)
            quantity = ask_int("Enter quantity", "quantity")
            session.pick(item_id, quantity)
        except InvalidInputError:
            say("Invalid quantity! Skipping item.", "error")
            continue
        except (ItemNotFoundError, NegativeQuantityError) as e:
            say(e, "error")
            continue
        say(f"Added {quantity} x {item.name}", "success")

    total = session.close()
    console.print(Panel(f"Total Bill: {format_price(total)}", style="success", expand=False))


ACTIONS = {
    1: add_item,
    2: display_items,
    3: search_item,
    4: update_item,
    5: delete_item,
    6: billing,
}


def handle_command(command, path=DATA_FILE):
    """
    Handles one menu choice. Returns False when the user chose to exit.
    """
    choice = parse_int(command)
    if choice is None:
        say("Please enter a valid number for choice.", "error")
        return True
    if choice == EXIT_CHOICE:
        return False

    action = ACTIONS.get(choice)
    if action is None:
        say("Invalid choice!", "error")
        return True

    try:
        action(path)
    except InvalidInputError as e:
        say(e, "error")
    except StorageError as e:
        say(f"Storage error: {e}", "error")
    return True


def main(path=DATA_FILE):
    while True:
        print_menu()
        try:
            keep_going = handle_command(ask("Enter choice"), path)
        except (KeyboardInterrupt, EOFError):
            break
        if not keep_going:
            break
    say("Goodbye!", "info")

if __name__ == "__main__":
    main()
