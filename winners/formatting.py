import re
from decimal import Decimal, InvalidOperation

_PHONE_MIDDLE = re.compile(r"(\d{2})\d+(\d{2})")


def mask_phone(phone):
    """Keep the first and last two digits of the first digit run: 98XXXXXX10."""
    if not phone:
        return phone
    return _PHONE_MIDDLE.sub(r"\1XXXXXX\2", phone, count=1)


def group_indian(amount) -> str:
    """Digit grouping used on Indian price tags: 14,80,000."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return str(amount)
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole, _, frac = f"{value:f}".partition(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        whole = ",".join(pairs + [tail])
    frac = frac.rstrip("0")
    return f"{sign}{whole}.{frac}" if frac else f"{sign}{whole}"


def format_inr(amount) -> str:
    return f"₹{group_indian(amount)}"
