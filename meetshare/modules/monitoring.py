from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator, metrics

PROMETHEUS_NAMESPACE = 'MeetShare'
PROMETHEUS_SUMMARIES_SUBSYSTEM = 'Summaries'
PROMETHEUS_SHARING_SUBSYSTEM = 'Sharing'

SUMMARY_INPUT_LENGTH_METRIC = Histogram(
    'summary_input_length',
    documentation='Measures the length of the input transcript',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    buckets=[50, 100, 500, 1000, 2000, 5000, 10000],
)

SUMMARY_DURATION_METRIC = Histogram(
    'summary_duration_seconds',
    documentation='Measures the duration of the summary generation in seconds',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    buckets=[5**n for n in range(4)],
    labelnames=['provider'],
)

SUMMARY_FALLBACK_COUNTER = Counter(
    'summary_fallbacks',
    documentation='Number of summaries that fell back to the local summarizer after an upstream error',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
)

EMAILS_SENT_COUNTER = Counter(
    'emails_sent',
    documentation='Number of emails handed over to a delivery provider',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SHARING_SUBSYSTEM,
    labelnames=['provider'],
)

SHARE_ERROR_COUNTER = Counter(
    'share_errors',
    documentation='Number of share requests that have failed',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SHARING_SUBSYSTEM,
)

instrumentator = Instrumentator(
    excluded_handlers=["/healthz", "/metrics"],
)

instrumentator.add(
    metrics.latency(buckets=[n for n in range(1, 6)]),
    metrics.requests(metric_namespace=PROMETHEUS_NAMESPACE),
)
