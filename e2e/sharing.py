from meetshare.logs import get_logger
from .common import post, recipient

log = get_logger(__name__)


async def share():
    body = {'summary': 'Summary:\n• e2e summary', 'recipients': [recipient], 'subject': 'MeetShare e2e', 'sender': ''}

    resp = await post('sharing/v1/share', json=body)
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    assert result.get('message') == 'Summary shared successfully', log.error(f'Unexpected response: {result}')


async def share_without_recipients():
    resp = await post('sharing/v1/share', json={'summary': 'Summary:', 'recipients': []})
    assert resp.status == 400, log.error(f'Unexpected status code: {resp.status}')


async def run():
    log.info('#### Running sharing e2e tests')

    log.info('POST sharing/v1/share - share a summary')
    await share()
    log.info('POST sharing/v1/share - reject a share without recipients')
    await share_without_recipients()

    return True
