"""OpenTelemetry tracing helpers for address expansion.

Each expanded record becomes one span; a batch run becomes a parent span with
one child per record, so slow or failing records can be found in a trace
viewer.

Usage with an OTLP backend:

    from address_index.pipeline import expand_record
    from address_index.tracing import configure_tracing, get_tracer, traced_expansion

    configure_tracing(endpoint="http://localhost:4318/v1/traces")
    expand = traced_expansion(expand_record, get_tracer("address-index"))
    documents = expand(record)

Usage without a backend:

    configure_tracing()   # uses ConsoleSpanExporter by default
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)

from .linear_ref import GeometryError
from .records import RecordError
from .schema import AddressDocument
from .settings import ExpansionSettings

ATTR_PLACE_ID = "address.place_id"
ATTR_INTERPOLATED = "address.interpolated"
ATTR_RECORD_COUNT = "address.records"
ATTR_SKIPPED_COUNT = "address.skipped"
ATTR_DOCUMENT_COUNT = "index.documents"

logger = logging.getLogger(__name__)

_provider: TracerProvider | None = None


def configure_tracing(
    endpoint: str | None = None,
    service_name: str = "address-index",
    exporter: SpanExporter | None = None,
) -> TracerProvider:
    """Create and register a global TracerProvider.

    Args:
        endpoint: OTLP HTTP endpoint URL to send traces to. When *None* and no
            *exporter* is given, spans are printed to stdout.
        service_name: Service label shown in the observability backend.
        exporter: Already-constructed exporter, e.g. ``InMemorySpanExporter``
            in tests. When provided, *endpoint* is ignored.

    Returns:
        The configured provider, also installed as the global OTel provider.
    """
    global _provider

    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)

    if exporter is not None:
        chosen_exporter: SpanExporter = exporter
    elif endpoint is not None:
        try:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
                OTLPSpanExporter,
            )
        except ImportError as exc:  # pragma: no cover
            raise ImportError(
                "opentelemetry-exporter-otlp-proto-http is required to export "
                "traces to an OTLP endpoint.  Install it with:\n"
                "  pip install opentelemetry-exporter-otlp-proto-http"
            ) from exc
        chosen_exporter = OTLPSpanExporter(endpoint=endpoint)
    else:
        chosen_exporter = ConsoleSpanExporter()

    provider.add_span_processor(SimpleSpanProcessor(chosen_exporter))
    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def get_tracer(name: str) -> trace.Tracer:
    """Return a tracer from the configured provider, or the no-op global one."""
    if _provider is not None:
        return _provider.get_tracer(name)
    return trace.get_tracer(name)


def traced_expansion(
    expand_fn: Callable[..., list[AddressDocument]],
    tracer: trace.Tracer,
) -> Callable[..., list[AddressDocument]]:
    """Wrap a per-record expansion callable so every call is recorded as a span.

    The span is named ``"address-expansion"`` and records:

    - ``address.place_id``: the record's place id, when present
    - ``address.interpolated``: whether the record carries an interpolation
    - ``index.documents``: the number of documents produced
    - span status: OK on success, ERROR on exception

    Args:
        expand_fn: Callable with signature ``(record: dict, ...) -> list[AddressDocument]``.
        tracer: OTel tracer to use for span creation.

    Returns:
        A wrapped callable with identical behaviour plus tracing.
    """

    def _wrapped(record: dict, *args, **kwargs) -> list[AddressDocument]:
        with tracer.start_as_current_span("address-expansion") as span:
            if record.get("place_id") is not None:
                span.set_attribute(ATTR_PLACE_ID, str(record["place_id"]))
            span.set_attribute(ATTR_INTERPOLATED, bool(record.get("interpolation")))
            try:
                documents = expand_fn(record, *args, **kwargs)
                span.set_attribute(ATTR_DOCUMENT_COUNT, len(documents))
                span.set_status(trace.StatusCode.OK)
                return documents
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise

    return _wrapped


def build_traced_batch(
    expand_fn: Callable[..., list[AddressDocument]],
    tracer: trace.Tracer,
    settings: ExpansionSettings | None = None,
) -> Callable[[Iterable[dict]], list[AddressDocument]]:
    """Expand a batch of records under a single ``"address-batch"`` parent span.

    Each record gets its own child span and is expanded with *settings*.
    Records failing with ``RecordError`` or ``GeometryError`` are skipped and
    logged, as in :func:`address_index.pipeline.expand_records`; their child
    span keeps the ERROR status. Every other error propagates.
    """
    w_expand = traced_expansion(expand_fn, tracer)

    def _batch(records: Iterable[dict]) -> list[AddressDocument]:
        with tracer.start_as_current_span("address-batch") as span:
            documents: list[AddressDocument] = []
            count = 0
            skipped = 0
            for record in records:
                count += 1
                try:
                    documents.extend(w_expand(record, settings))
                except (RecordError, GeometryError) as exc:
                    skipped += 1
                    logger.warning("Skipping record %s: %s", record.get("place_id"), exc)
            span.set_attribute(ATTR_RECORD_COUNT, count)
            span.set_attribute(ATTR_SKIPPED_COUNT, skipped)
            span.set_attribute(ATTR_DOCUMENT_COUNT, len(documents))
            return documents

    return _batch
