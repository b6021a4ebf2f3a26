"""Dependency definitions for the keymask API server."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status

from keymask import metrics
from keymask.config import Settings, get_settings
from keymask.masking import FormatRule, UnknownFormatError, get_rule, list_rules

logger = logging.getLogger(__name__)

RuleLookup = Callable[[str], Optional[FormatRule]]
RuleCatalogue = Callable[[], list[FormatRule]]


def get_rule_lookup(settings: Settings = Depends(get_settings)) -> RuleLookup:
    """Return a lookup applying the configured unknown-format policy.

    Strict deployments let ``UnknownFormatError`` propagate (mapped to 404);
    otherwise the lookup yields ``None`` and callers pass values through.
    """

    strict = settings.strict_formats

    def lookup(format_id: str) -> Optional[FormatRule]:
        try:
            return get_rule(format_id)
        except UnknownFormatError as exc:
            metrics.UNKNOWN_FORMATS.labels(strict=str(strict).lower()).inc()
            if strict:
                raise
            logger.warning("%s; passing value through unchanged", exc)
            return None

    return lookup


def get_rule_catalogue() -> RuleCatalogue:
    return list_rules


def require_api_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when required."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.split("Bearer ")[-1].strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
