import time
from typing import Optional

from meetshare.constants import trimmed_whitespace
from meetshare.logs import get_logger
from meetshare.modules.monitoring import (
    SUMMARY_DURATION_METRIC,
    SUMMARY_FALLBACK_COUNTER,
    SUMMARY_INPUT_LENGTH_METRIC,
)

from .providers import fallback_provider, select_summary_provider, SummaryProvider

provider: Optional[SummaryProvider] = None
log = get_logger(__name__)


def initialize():
    global provider

    provider = select_summary_provider()


def get_provider() -> SummaryProvider:
    if provider is None:
        initialize()

    return provider


async def summarize(transcript: str, custom_prompt: Optional[str] = None) -> str:
    """
    Summarizes the transcript with the configured provider. Any provider error is
    logged and answered with the local summary instead, so this only raises on empty input.
    """

    if not transcript or not transcript.strip(trimmed_whitespace):
        raise ValueError('Transcript is empty')

    current_provider = get_provider()
    start = time.perf_counter()

    SUMMARY_INPUT_LENGTH_METRIC.observe(len(transcript))

    try:
        result = await current_provider.summarize(transcript, custom_prompt)
    except Exception as e:
        log.error(f'Summary provider {current_provider.name.value} failed, using local summary: {e}')
        SUMMARY_FALLBACK_COUNTER.inc()

        current_provider = fallback_provider
        result = await current_provider.summarize(transcript, custom_prompt)

    duration = time.perf_counter() - start
    SUMMARY_DURATION_METRIC.labels(provider=current_provider.name.value).observe(duration)

    log.info(f'input length: {len(transcript)}')
    log.info(f'output length: {len(result)}')

    return result


__all__ = ['get_provider', 'initialize', 'summarize']
