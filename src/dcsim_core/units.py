# src/dcsim_core/units.py
import logging
from tokenize import TokenError
from typing import Union

import pint

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

# --- Canonical dimensionality objects for explicit checks ---
RESISTANCE_DIMENSIONALITY = ureg.parse_expression('ohm').dimensionality
CURRENT_DIMENSIONALITY = ureg.parse_expression('ampere').dimensionality
VOLTAGE_DIMENSIONALITY = ureg.parse_expression('volt').dimensionality


def _to_float(value, text) -> float:
    try:
        return float(value)
    except (OverflowError, ValueError, TypeError) as e:
        raise ValueError(f"Value '{text}' is not representable as a float: {e}") from e


def parse_quantity(raw_value: Union[str, int, float], expected_unit: str) -> float:
    """
    Converts a raw netlist value into a float magnitude in `expected_unit`.

    Plain numbers (and strings holding plain numbers) are taken to already be in
    `expected_unit`. Strings carrying a unit (e.g. "4.7 kohm", "2mA") are parsed
    with pint and must be dimensionally compatible with `expected_unit`.

    Raises:
        ValueError: If the value cannot be parsed, overflows a float or has the
            wrong dimension.
    """
    if isinstance(raw_value, bool):
        raise ValueError(f"Boolean '{raw_value}' is not a valid numeric value.")
    if isinstance(raw_value, (int, float)):
        return _to_float(raw_value, raw_value)

    text = str(raw_value).strip()
    if not text:
        raise ValueError("Value is empty.")
    try:
        return float(text)
    except ValueError:
        pass

    try:
        qty = ureg.Quantity(text)
    except (pint.errors.PintError, TokenError, SyntaxError, AttributeError, TypeError, ValueError, ArithmeticError) as e:
        # pint evaluates the string as arithmetic: "1/0" or "10**400" end up here.
        raise ValueError(f"Could not parse '{text}' as a quantity: {e}") from e

    if not isinstance(qty, Quantity):
        # Pure numeric expressions such as "2*5" come back as plain numbers.
        return _to_float(qty, text)
    target = 'dimensionless' if qty.dimensionless else expected_unit
    if not qty.is_compatible_with(target):
        raise ValueError(
            f"Value '{text}' has dimensionality '{qty.dimensionality}', "
            f"which is not compatible with '{expected_unit}'."
        )
    try:
        magnitude = qty.to(target).magnitude
    except ArithmeticError as e:
        raise ValueError(f"Value '{text}' is out of range: {e}") from e
    return _to_float(magnitude, text)


def is_unit_name(token: str) -> bool:
    """True if `token` names a unit known to the registry (prefixes allowed, e.g. "kohm")."""
    if not token.isidentifier():
        return False
    try:
        return token in ureg
    except (pint.errors.PintError, TokenError, SyntaxError, AttributeError, TypeError, ValueError):
        return False
