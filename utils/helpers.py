# Utility functions

import math


def parse_int(text):
    """
    Returns ``text`` as an int, or None when it is not a whole number.
    """
    text = text.strip()
    digits = text[1:] if text[:1] in "+-" else text
    if not digits.isdigit() or not digits.isascii():
        return None
    return int(text)


def parse_float(text):
    """
    Returns ``text`` as a float, or None when it is not a number.
    Digit separators ("1_5") are not numbers here.
    """
    if "_" in text:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def is_valid_price(price):
    return math.isfinite(price) and price >= 0


def format_price(value):
    return f"{value:.2f}"

if __name__ == "__main__":
    # Example usage
    print(parse_int("42"), parse_int("Bun"), parse_float("2.50"), format_price(14.5))
