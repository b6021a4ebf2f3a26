"""ASGI application for keymask."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Optional
from uuid import uuid4

from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from keymask import __version__, metrics
from keymask.config import Settings, get_settings
from keymask.logging_utils import configure_logging as configure_app_logging
from keymask.masking import (
    FormatDomain,
    FormatRule,
    UnknownFormatError,
    clean,
    get_rule,
    render,
)
from keymask.models.formats import (
    BatchFormatRequest,
    BatchFormatResponse,
    FormatDescriptor,
    FormatRequest,
    FormatResponse,
)
from keymask.server import deps

logger = logging.getLogger(__name__)


def _json_safe(value: Any) -> Any:
    """Convert non-serializable values into JSON-safe representations."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.hex()
    if isinstance(value, (list, tuple)):
        return [_json_safe(entry) for entry in value]
    if isinstance(value, dict):
        return {key: _json_safe(sub_value) for key, sub_value in value.items()}
    return repr(value)


def _normalize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Ensure validation error payloads can be serialized to JSON.

    The offending ``input`` is dropped since it may hold a raw identifier.
    """

    normalized: list[dict[str, Any]] = []
    for error in errors:
        normalized.append(
            {key: _json_safe(value) for key, value in error.items() if key != "input"}
        )
    return normalized


def _configure_logging(settings: Settings) -> None:
    secrets = [settings.api_token or ""]
    configure_app_logging(settings.log_level, settings.log_format, secrets)


def _mask(rule: Optional[FormatRule], raw: str) -> str:
    if rule is None:
        return raw
    metrics.MASKED_VALUES.labels(format_id=rule.format_id).inc()
    return render(rule, clean(rule, raw))


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="keymask", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("keymask.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details without leaking submitted values."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=path,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                duration_ms / 1000.0
            )
            return response

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = _normalize_validation_errors(exc.errors())
        log_kwargs: dict[str, Any] = {}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            log_kwargs["extra"] = {"request_id": request_id}

        logger.warning(
            "Validation error on %s %s: %s",
            request.method,
            request.url.path,
            errors,
            **log_kwargs,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": errors},
        )

    @application.exception_handler(UnknownFormatError)
    async def unknown_format_handler(request: Request, exc: UnknownFormatError):
        current = get_settings()
        suggestions = exc.suggest(
            limit=current.suggestion_limit,
            cutoff=current.suggestion_cutoff,
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "detail": f"Unknown format: {exc.format_id}",
                "format_id": exc.format_id,
                "suggestions": list(suggestions),
            },
        )

    @application.get("/health", summary="Liveness probe")
    def health(catalogue: deps.RuleCatalogue = Depends(deps.get_rule_catalogue)) -> dict[str, Any]:
        return {"status": "ok", "version": __version__, "formats": len(catalogue())}

    @application.get(
        "/formats",
        response_model=list[FormatDescriptor],
        summary="List supported formats",
    )
    def formats_list(
        domain: Optional[FormatDomain] = Query(default=None),
        region: Optional[str] = Query(default=None, min_length=2, max_length=2),
        catalogue: deps.RuleCatalogue = Depends(deps.get_rule_catalogue),
    ) -> list[FormatDescriptor]:
        rules = catalogue()
        if domain is not None:
            rules = [rule for rule in rules if rule.domain is domain]
        if region is not None:
            wanted = region.upper()
            rules = [rule for rule in rules if rule.region == wanted]
        return [FormatDescriptor.from_rule(rule) for rule in rules]

    @application.get(
        "/formats/{format_id}",
        response_model=FormatDescriptor,
        summary="Describe one format",
    )
    def formats_detail(format_id: str) -> FormatDescriptor:
        return FormatDescriptor.from_rule(get_rule(format_id))

    @application.post("/format", response_model=FormatResponse, summary="Mask one value")
    def format_endpoint(
        payload: FormatRequest,
        auth: None = Depends(deps.require_api_token),
        lookup: deps.RuleLookup = Depends(deps.get_rule_lookup),
    ) -> FormatResponse:
        rule = lookup(payload.format_id)
        return FormatResponse(
            format_id=payload.format_id,
            value=payload.value,
            masked=_mask(rule, payload.value),
            known=rule is not None,
        )

    @application.post(
        "/format/batch",
        response_model=BatchFormatResponse,
        summary="Mask several values with the same format",
    )
    def format_batch_endpoint(
        payload: BatchFormatRequest,
        auth: None = Depends(deps.require_api_token),
        lookup: deps.RuleLookup = Depends(deps.get_rule_lookup),
    ) -> BatchFormatResponse:
        rule = lookup(payload.format_id)
        return BatchFormatResponse(
            format_id=payload.format_id,
            masked=[_mask(rule, value) for value in payload.values],
            known=rule is not None,
        )

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


app = create_app()

__all__ = ["app", "create_app"]
