import asyncio

from .common import close_session, get, modules


async def health():
    resp = await get('healthz')
    assert resp.status == 200, f'Unexpected status code: {resp.status}'

    return True


async def main():
    success = True
    tasks = [health()]

    if 'summaries' in modules:
        from .summaries import run as summaries_run

        tasks.append(summaries_run())

    if 'sharing' in modules:
        from .sharing import run as sharing_run

        tasks.append(sharing_run())

    try:
        success = all(await asyncio.gather(*tasks))
    except Exception:
        success = False
    finally:
        await close_session()

    if not success:
        raise Exception('E2E tests failed')


asyncio.run(main())
