from typing import Optional

from meetshare.logs import get_logger

from .delivery import DeliveryProvider, select_delivery_provider

provider: Optional[DeliveryProvider] = None
log = get_logger(__name__)


def initialize():
    global provider

    provider = select_delivery_provider()


def get_provider() -> DeliveryProvider:
    if provider is None:
        initialize()

    return provider


async def share(summary: str, recipients: list[str], subject: str, sender: str) -> None:
    if not summary or not recipients:
        raise ValueError('A summary and at least one recipient are required')

    current_provider = get_provider()

    log.info(f'Sharing summary with {len(recipients)} recipient(s) via {current_provider.name.value}')

    await current_provider.deliver(recipients, subject, summary, sender)


__all__ = ['get_provider', 'initialize', 'share']
