"""Prometheus metrics for monitoring document generation"""

from prometheus_client import Counter, Histogram

# Document metrics
documents_generated_counter = Counter(
    "application_documents_generated_total",
    "PDF documents produced",
    ["state"],  # Pending | Activated | InReview
)

documents_skipped_counter = Counter(
    "application_documents_skipped_total",
    "Requests that produced no document",
    ["reason"],  # not_found | unsupported_state
)

document_failures_counter = Counter(
    "application_document_failures_total",
    "Rendering failures propagated to the caller",
    ["stage"],  # view | pdf
)

document_generation_histogram = Histogram(
    "application_document_generation_seconds",
    "Time to render a document from template to PDF bytes",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)
