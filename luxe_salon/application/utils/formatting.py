from __future__ import annotations


def format_service_title(slug: str) -> str:
    """'hair-cut' -> 'Hair Cut'. Only the first letter of each word changes."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def format_currency(amount: float | int) -> str:
    """Rupee amount with Indian digit grouping: 125000 -> '₹1,25,000'."""
    value = float(amount)
    sign = "-" if value < 0 else ""
    digits, cents = f"{abs(value):.2f}".split(".")
    cents = cents.rstrip("0")

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    if cents:
        return f"{sign}₹{digits}.{cents}"
    return f"{sign}₹{digits}"
