"""
Keystroke masking for national identifiers, phone numbers, dates, amounts
and technical codes.

The package exposes the pure masking engine (``keymask.masking``), a field
binding layer for UI integrations, and CLI / HTTP front ends.
"""

from keymask.masking import FormatId, UnknownFormatError, format_value

__all__ = ["__version__", "FormatId", "UnknownFormatError", "format_value"]

__version__ = "0.1.0"
