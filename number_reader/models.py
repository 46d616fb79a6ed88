"""
Pydantic models for number reading — the configuration is data, not code.

The reading algorithm never hardcodes a word. Every digit name, magnitude
word and tone-mutated form comes from a frozen ReadingConfig, so another
language (or another currency unit) is a new config value, not a new
converter. Bad configs fail loudly at construction, not halfway through a
conversion.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import MagnitudeOutOfRangeError


# ─── Reading Configuration ──────────────────────────────────────────


class ReadingConfig(BaseModel):
    """Immutable word tables and input syntax for one target language."""

    model_config = {"frozen": True, "extra": "forbid"}

    # Output
    separator: str = " "
    unit: tuple[str, ...] = ("đồng",)

    # Input syntax
    negative_sign: str = "-"
    point_sign: str = "."
    thousand_sign: str = ","
    period_size: int = Field(default=3, ge=1, le=3)
    filled_digit: str = "0"

    # Word tables
    digits: tuple[str, ...] = (
        "không",
        "một",
        "hai",
        "ba",
        "bốn",
        "năm",
        "sáu",
        "bảy",
        "tám",
        "chín",
    )
    # Group distance from the decimal point → words naming that magnitude
    units: dict[int, tuple[str, ...]] = {
        0: (),
        1: ("nghìn",),
        2: ("triệu",),
        3: ("tỉ",),
        4: ("nghìn", "tỉ"),
        5: ("triệu", "tỉ"),
        6: ("tỉ", "tỉ"),
    }

    # Irregular words
    negative_text: str = "âm"
    point_text: str = "chấm"
    odd_text: str = "lẻ"
    ten_text: str = "mười"
    hundred_text: str = "trăm"

    # Tone-mutated forms of a trailing digit
    one_tone_text: str = "mốt"
    four_tone_text: str = "tư"
    five_tone_text: str = "lăm"
    ten_tone_text: str = "mươi"

    @field_validator("digits")
    @classmethod
    def _check_digit_table(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) < 10:
            raise ValueError(f"digit table needs 10 entries, got {len(value)}")
        return value

    @field_validator("units", mode="before")
    @classmethod
    def _units_from_sequence(cls, value: Any) -> Any:
        # A flat list is indexed by group distance
        if isinstance(value, (list, tuple)):
            return dict(enumerate(value))
        return value

    @field_validator("units")
    @classmethod
    def _check_units_contiguous(
        cls, value: dict[int, tuple[str, ...]]
    ) -> dict[int, tuple[str, ...]]:
        if sorted(value) != list(range(len(value))):
            raise ValueError(
                f"magnitude table keys must run 0..{len(value) - 1}, got {sorted(value)}"
            )
        return value

    @field_validator("negative_sign", "point_sign", "thousand_sign", "filled_digit")
    @classmethod
    def _check_single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_signs(self) -> ReadingConfig:
        signs = (self.negative_sign, self.point_sign, self.thousand_sign)
        if len(set(signs)) != len(signs):
            raise ValueError(f"sign characters must be distinct: {signs}")
        if any(s in "0123456789" for s in signs):
            raise ValueError(f"sign characters cannot be digits: {signs}")
        if self.filled_digit not in "0123456789":
            raise ValueError(f"filled_digit must be a digit, got {self.filled_digit!r}")
        return self

    def magnitude_words(self, distance: int) -> tuple[str, ...]:
        """Words naming the group `distance` places left of the units group.

        Raises:
            MagnitudeOutOfRangeError: If the table has no entry that far out.
        """
        try:
            return self.units[distance]
        except KeyError:
            raise MagnitudeOutOfRangeError(
                f"No magnitude word for group distance {distance} "
                f"(table covers 0..{len(self.units) - 1})",
                details={"distance": distance, "max_distance": len(self.units) - 1},
            ) from None

    @property
    def max_integral_digits(self) -> int:
        return len(self.units) * self.period_size


DEFAULT_CONFIG = ReadingConfig()


# ─── Parsed Number ──────────────────────────────────────────────────


class NumberData(BaseModel):
    """A validated literal split into digit values.

    integral_part is never empty: zero reads as one all-zero period.
    """

    model_config = {"frozen": True}

    is_negative: bool
    integral_part: tuple[tuple[int, ...], ...] = Field(min_length=1)
    fractional_part: tuple[int, ...] = ()
