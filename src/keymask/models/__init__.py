"""Pydantic models defining shared data contracts."""

from keymask.models.binding import BindingOptions
from keymask.models.formats import (
    BatchFormatRequest,
    BatchFormatResponse,
    FormatDescriptor,
    FormatRequest,
    FormatResponse,
)

__all__ = [
    "BindingOptions",
    "BatchFormatRequest",
    "BatchFormatResponse",
    "FormatDescriptor",
    "FormatRequest",
    "FormatResponse",
]
