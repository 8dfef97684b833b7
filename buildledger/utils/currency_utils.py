"""
Currency utility functions.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

Number = Union[int, float, Decimal]


class CurrencyUtils:
    """Utility functions for currency operations."""

    # Common currency symbols
    CURRENCY_SYMBOLS = {
        'INR': '₹',
        'USD': '$',
        'EUR': '€',
        'GBP': '£',
        'JPY': '¥'
    }

    @staticmethod
    def _to_decimal(amount: Number) -> Decimal:
        if isinstance(amount, Decimal):
            return amount
        return Decimal(str(amount))

    @staticmethod
    def group_indian(digits: str) -> str:
        """Group an integer digit string the en-IN way (last three, then pairs)."""
        if len(digits) <= 3:
            return digits
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        return ",".join(pairs + [tail])

    @staticmethod
    def format_inr(amount: Number, show_symbol: bool = True) -> str:
        """Format amount as Indian rupees, e.g. ₹12,34,567.5."""
        if amount is None:
            return "N/A"

        value = CurrencyUtils._to_decimal(amount).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        integral, _, fraction = f"{abs(value):.2f}".partition(".")
        fraction = fraction.rstrip("0")

        formatted = CurrencyUtils.group_indian(integral)
        if fraction:
            formatted = f"{formatted}.{fraction}"

        symbol = CurrencyUtils.CURRENCY_SYMBOLS['INR'] if show_symbol else ""
        return f"{sign}{symbol}{formatted}"

    @staticmethod
    def format_amount(amount: Number, currency: str = 'INR', show_symbol: bool = True) -> str:
        """Format amount with currency symbol and proper decimal places."""
        if amount is None:
            return "N/A"

        if currency.upper() == 'INR':
            return CurrencyUtils.format_inr(amount, show_symbol=show_symbol)

        # Round to 2 decimal places
        rounded_amount = CurrencyUtils._to_decimal(amount).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

        # Format with commas for thousands
        formatted = f"{rounded_amount:,.2f}"

        if show_symbol:
            symbol = CurrencyUtils.CURRENCY_SYMBOLS.get(currency.upper(), currency)
            return f"{symbol}{formatted}"

        return formatted

    @staticmethod
    def parse_amount(raw) -> Optional[float]:
        """Parse a loosely typed amount into a finite float, or None."""
        if raw is None or isinstance(raw, bool):
            return None

        if isinstance(raw, (int, float, Decimal)):
            value = float(raw)
        else:
            cleaned = str(raw).strip()
            for symbol in CurrencyUtils.CURRENCY_SYMBOLS.values():
                cleaned = cleaned.replace(symbol, '')
            cleaned = cleaned.replace(',', '').strip()
            if not cleaned:
                return None
            try:
                value = float(Decimal(cleaned))
            except (InvalidOperation, ValueError):
                return None

        if not math.isfinite(value):
            return None
        return value

    @staticmethod
    def format_percentage_one_decimal(percentage: float) -> str:
        """Format a percentage with one decimal, e.g. 25.0%."""
        rounded = Decimal(str(percentage)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
        return f"{rounded}%"
