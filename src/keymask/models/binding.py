"""Construction-time options for a field binding."""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from keymask.masking import FormatId


class BindingOptions(BaseModel):
    """Which format a binding applies and who hears about each result."""

    format_id: FormatId
    on_format: Optional[Callable[[str], None]] = Field(default=None)

    model_config = ConfigDict(frozen=True)
