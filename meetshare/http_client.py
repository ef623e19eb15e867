"""
Simple async HTTP client with a shared session. We are only going to talk
to a handful of third-party APIs so using a single session is OK.
"""

import aiohttp


_session = None


def _get_session():
    global _session

    if _session is None:
        _session = aiohttp.ClientSession()
    return _session


def _with_timeout(kwargs, timeout):
    if timeout:
        kwargs['timeout'] = aiohttp.ClientTimeout(total=timeout)

    return kwargs


async def post(url, type='json', timeout=None, **kwargs):
    """
    Posts to **url** and raises aiohttp.ClientResponseError on a non-2xx status.
    """

    session = _get_session()
    async with session.post(url, raise_for_status=True, **_with_timeout(kwargs, timeout)) as response:
        if type == 'json':
            return await response.json(content_type=None)

        return await response.text()


async def close():
    global _session

    if _session is not None:
        await _session.close()

        _session = None


__all__ = ['close', 'post']
