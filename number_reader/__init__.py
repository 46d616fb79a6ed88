"""
Number Reader — spell out numeric literals in Vietnamese words.

Architecture: Validate → Normalize → Segment → Render groups → Assemble
Philosophy:  Every word comes from the config. The algorithm only decides order.
"""

from .config import load_config
from .exceptions import (
    MagnitudeOutOfRangeError,
    MalformedLiteralError,
    NumberReadingError,
    UnsupportedInputKindError,
)
from .models import DEFAULT_CONFIG, NumberData, ReadingConfig
from .reader import convert_number_to_words

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONFIG",
    "MagnitudeOutOfRangeError",
    "MalformedLiteralError",
    "NumberData",
    "NumberReadingError",
    "ReadingConfig",
    "UnsupportedInputKindError",
    "convert_number_to_words",
    "load_config",
]
