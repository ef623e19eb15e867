import aiohttp

from meetshare.logs import get_logger
from .common import post

log = get_logger(__name__)

standup_text = (
    'Anna: Good morning everyone, let us start with the release status. '
    'Ben: The payment service migration finished yesterday without downtime! '
    'Anna: Great. Are the dashboards updated for the new service? '
    'Ben: Not yet, I will update them by Thursday. '
    'Clara: The mobile team is blocked on the new login screen designs. '
    'Anna: I will ask design to share them today. '
    'Clara: Thanks. We also need a decision on dropping support for the old app version.'
)


async def summarize_json():
    resp = await post('summaries/v1/summarize', json={'transcript': standup_text, 'customPrompt': 'List the action items.'})
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    assert result.get('success'), log.error(f'Unexpected response: {result}')
    log.info(f'Response: {result.get("summary")}')

    return result.get('summary')


async def summarize_file():
    form = aiohttp.FormData()
    form.add_field('transcript', standup_text.encode('utf-8'), filename='standup.txt', content_type='text/plain')

    resp = await post('summaries/v1/summarize', data=form)
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    assert result.get('originalText') == standup_text, log.error('Transcript was not read back')


async def summarize_empty():
    resp = await post('summaries/v1/summarize', json={'transcript': '   '})
    assert resp.status == 400, log.error(f'Unexpected status code: {resp.status}')


async def run():
    log.info('#### Running summaries e2e tests')

    log.info('POST summaries/v1/summarize - summarize a json transcript')
    await summarize_json()
    log.info('POST summaries/v1/summarize - summarize an uploaded transcript')
    await summarize_file()
    log.info('POST summaries/v1/summarize - reject an empty transcript')
    await summarize_empty()

    return True
