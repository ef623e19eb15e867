import asyncio
import html

import aiohttp

from meetshare import http_client
from meetshare.constants import DeliveryProviders, sendgrid_key_prefix
from meetshare.env import delivery_timeout, sendgrid_api_key, sendgrid_api_url, share_simulated_delay
from meetshare.logs import get_logger, mask_secret
from meetshare.modules.monitoring import EMAILS_SENT_COUNTER

log = get_logger(__name__)


class DeliveryError(RuntimeError):
    pass


def render_html(summary: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; line-height: 1.6;">'
        '<h2>Meeting Summary</h2>'
        f'<div style="white-space: pre-wrap;">{html.escape(summary)}</div>'
        '</div>'
    )


def build_message(recipient: str, subject: str, summary: str, sender: str) -> dict:
    """
    Builds a SendGrid v3 mail/send body for a single recipient, with a plain text and an html version of the summary.
    """

    return {
        'personalizations': [{'to': [{'email': recipient}]}],
        'from': {'email': sender},
        'subject': subject,
        'content': [
            {'type': 'text/plain', 'value': summary},
            {'type': 'text/html', 'value': render_html(summary)},
        ],
    }


class DeliveryProvider:
    name: DeliveryProviders

    async def deliver(self, recipients: list[str], subject: str, summary: str, sender: str) -> None:
        raise NotImplementedError


class LogDeliveryProvider(DeliveryProvider):
    name = DeliveryProviders.LOG

    def __init__(self, delay: float = share_simulated_delay):
        self.delay = delay

    async def deliver(self, recipients: list[str], subject: str, summary: str, sender: str) -> None:
        log.info(f'Email would be sent to: {recipients}')
        log.info(f'Subject: {subject}')
        log.info(f'Content: {summary}')
        log.info('Configure SENDGRID_API_KEY to send real emails')

        await asyncio.sleep(self.delay)

        EMAILS_SENT_COUNTER.labels(provider=self.name.value).inc(len(recipients))


class SendGridDeliveryProvider(DeliveryProvider):
    name = DeliveryProviders.SENDGRID

    def __init__(self, api_key: str):
        self.api_key = api_key

    def validate_api_key(self) -> None:
        if not self.api_key.startswith(sendgrid_key_prefix):
            log.error(f'SendGrid API key must start with "{sendgrid_key_prefix}", got {mask_secret(self.api_key)}')

            raise DeliveryError('Invalid SendGrid API key format')

    async def deliver(self, recipients: list[str], subject: str, summary: str, sender: str) -> None:
        self.validate_api_key()

        # the first failing recipient aborts the whole share
        for recipient in recipients:
            try:
                await http_client.post(
                    sendgrid_api_url,
                    type='text',
                    timeout=delivery_timeout,
                    headers={'Authorization': f'Bearer {self.api_key}'},
                    json=build_message(recipient, subject, summary, sender),
                )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise DeliveryError(f'Failed to send email to {recipient}: {e}') from e

            log.info(f'Email sent successfully to: {recipient}')
            EMAILS_SENT_COUNTER.labels(provider=self.name.value).inc()


def select_delivery_provider(api_key: str | None = sendgrid_api_key) -> DeliveryProvider:
    if api_key:
        log.info(f'Sending emails through SendGrid ({mask_secret(api_key)})')

        return SendGridDeliveryProvider(api_key)

    log.info('No SendGrid API key configured, emails will only be logged')

    return LogDeliveryProvider()
