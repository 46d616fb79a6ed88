"""
Turn a numeric literal into digit periods.

Flow:
    value ─► validate_number ─► "1,234.50"
          ─► remove separators ─► sign ─► trim zeros ─► split on point
          ─► pad + zip periods ─► NumberData

Every rejection happens here, before any word is rendered.
"""

from __future__ import annotations

import re

from .exceptions import (
    MagnitudeOutOfRangeError,
    MalformedLiteralError,
    UnsupportedInputKindError,
)
from .models import DEFAULT_CONFIG, NumberData, ReadingConfig


# ─── Input Validator ────────────────────────────────────────────────


def validate_number(value: object, config: ReadingConfig = DEFAULT_CONFIG) -> str:
    """Return the literal string for a str or int value.

    Integers go through str() so no digit is ever lost to a float.

    Raises:
        UnsupportedInputKindError: For floats, Decimals, bools, None, ...
        MagnitudeOutOfRangeError: For ints too long for the magnitude table.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        # Checked before str(), which refuses ints past sys.get_int_max_str_digits()
        if abs(value) >= 10**config.max_integral_digits:
            raise MagnitudeOutOfRangeError(
                f"Integer has more than {config.max_integral_digits} digits; "
                f"the magnitude table cannot name it",
                details={"max_digits": config.max_integral_digits},
            )
        if value < 0:
            return config.negative_sign + str(-value)
        return str(value)
    raise UnsupportedInputKindError(
        f"Cannot read a {type(value).__name__}; pass a decimal string or an int",
        details={"type": type(value).__name__},
    )


# ─── Normalizer ─────────────────────────────────────────────────────


def remove_thousands_separators(config: ReadingConfig, number: str) -> str:
    return number.replace(config.thousand_sign, "")


def trim_redundant_zeros(config: ReadingConfig, number: str) -> str:
    """Strip leading zeros, and trailing fractional zeros when there is a point."""
    if config.point_sign in number:
        return number.rstrip(config.filled_digit).lstrip(config.filled_digit)
    return number.lstrip(config.filled_digit)


def _literal_pattern(config: ReadingConfig) -> re.Pattern[str]:
    sign = re.escape(config.negative_sign)
    point = re.escape(config.point_sign)
    return re.compile(rf"{sign}?[0-9]*(?:{point}[0-9]*)?")


def check_literal(config: ReadingConfig, number: str, original: str) -> None:
    """Reject anything but [sign]digits[point digits], with at least one digit.

    Raises:
        MalformedLiteralError: On stray characters, repeated signs or points,
            or a literal without digits.
    """
    if _literal_pattern(config).fullmatch(number) and any(ch.isdigit() for ch in number):
        return
    raise MalformedLiteralError(
        f"Not a numeric literal: {original!r}",
        details={"value": original},
    )


# ─── Segmenter ──────────────────────────────────────────────────────


def add_leading_zeros_to_fit_period(config: ReadingConfig, number: str) -> str:
    width = -(-len(number) // config.period_size) * config.period_size
    return number.rjust(width, config.filled_digit)


def split_to_digits(number: str) -> list[int]:
    return [int(ch) for ch in number]


def zip_integral_periods(config: ReadingConfig, digits: list[int]) -> list[tuple[int, ...]]:
    size = config.period_size
    return [tuple(digits[i : i + size]) for i in range(0, len(digits), size)]


def parse_number_data(config: ReadingConfig, number: str) -> NumberData:
    """Parse a literal string into sign, integral periods and fractional digits.

    Args:
        config: Supplies the sign/point/separator/fill characters.
        number: e.g. "-1,234.50"

    Returns:
        NumberData(is_negative=True, integral_part=((0, 0, 1), (2, 3, 4)),
                   fractional_part=(5,))

    Raises:
        MalformedLiteralError: If the string is not a numeric literal.
        MagnitudeOutOfRangeError: If the magnitude table cannot name the
            most significant period.
    """
    number_string = remove_thousands_separators(config, number)
    check_literal(config, number_string, number)

    is_negative = number_string.startswith(config.negative_sign)
    if is_negative:
        number_string = number_string[len(config.negative_sign) :]
    number_string = trim_redundant_zeros(config, number_string)

    integral_string, _, fractional_string = number_string.partition(config.point_sign)
    integral_string = add_leading_zeros_to_fit_period(config, integral_string)

    integral_part = zip_integral_periods(config, split_to_digits(integral_string))
    if not integral_part:
        integral_part.append((0,) * config.period_size)

    if len(integral_part) > len(config.units):
        raise MagnitudeOutOfRangeError(
            f"{number!r} has {len(integral_part)} digit groups; "
            f"the magnitude table names at most {len(config.units)}",
            details={
                "value": number,
                "groups": len(integral_part),
                "max_groups": len(config.units),
            },
        )

    return NumberData(
        is_negative=is_negative,
        integral_part=tuple(integral_part),
        fractional_part=tuple(split_to_digits(fractional_string)),
    )
