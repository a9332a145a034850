"""Runtime configuration defaults for pricing, display and debug logging."""

from __future__ import annotations

from decimal import Decimal

DEBUG_LOG_PATH = "/tmp/pizzeria-debug.log"
DEBUG_LOG_ENV = "PIZZERIA_DEBUG_LOG"

CURRENCY_SUFFIX = "р"
CURRENCY_SUFFIX_ENV = "PIZZERIA_CURRENCY_SUFFIX"

# Keyed by PizzaSize value; unknown sizes fall back to DEFAULT_SIZE_MULTIPLIER.
SIZE_MULTIPLIERS: dict[str, Decimal] = {
    "Small": Decimal("1.0"),
    "Medium": Decimal("1.2"),
    "Large": Decimal("1.4"),
}
DEFAULT_SIZE_MULTIPLIER = Decimal("1.0")

# A non-classic crust may cost at most this multiple of the classic crust.
CLASSIC_PRICE_CEILING_RATIO = Decimal("1.2")

# When True the size multiplier also applies to the crust price.
SCALE_CRUST_BY_SIZE = False

CUSTOM_PIZZA_NAME = "Custom Pizza"
