from argparse import ArgumentParser

import aiohttp


session = None
parser = ArgumentParser()
parser.add_argument('-u', '--url', dest='url', help='meetshare url', default='http://localhost:8000')
parser.add_argument(
    '-modules',
    '--modules',
    dest='modules',
    help='modules to run e2e on',
    default='summaries,sharing',
)
parser.add_argument('-r', '--recipient', dest='recipient', help='recipient of the shared summary', default='e2e@example.com')

args = parser.parse_args()
base_url = args.url
modules = args.modules.split(',')
recipient = args.recipient


def get_session():
    global session

    if session is None:
        session = aiohttp.ClientSession()

    return session


async def close_session():
    if session is not None:
        await session.close()


async def post(path, **kwargs):
    url = f'{base_url}/{path}'

    return await get_session().post(url, **kwargs)


async def get(path):
    url = f'{base_url}/{path}'

    return await get_session().get(url)


__all__ = ['close_session', 'get', 'post']
