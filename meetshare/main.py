import asyncio
import importlib.metadata
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import FileResponse

from meetshare import http_client
from meetshare.env import app_port, enable_metrics, metrics_port, modules
from meetshare.logs import get_logger
from meetshare.models.v1.common import HealthResponse
from meetshare.utils import create_app, create_webserver, utc_timestamp

log = get_logger(__name__)

if not modules:
    log.warning('No modules enabled!')
    sys.exit(1)

log.info(f'Enabled modules: {modules}')


@asynccontextmanager
async def lifespan(main_app: FastAPI):
    log.info(f'MeetShare {importlib.metadata.version("meetshare")} is up')

    if 'summaries' in modules:
        from meetshare.modules.summaries.app import app as summaries_app, app_startup as summaries_startup

        main_app.mount('/summaries', summaries_app)
        await summaries_startup()

    if 'sharing' in modules:
        from meetshare.modules.sharing.app import app as sharing_app, app_startup as sharing_startup

        main_app.mount('/sharing', sharing_app)
        await sharing_startup()

    yield

    log.info('MeetShare is shutting down')

    await http_client.close()


app = create_app(lifespan=lifespan)


@app.get('/')
def root():
    return FileResponse(os.path.join(os.path.dirname(__file__), 'index.html'))


@app.get('/healthz')
def health() -> HealthResponse:
    '''
    Liveness check.
    '''

    return HealthResponse(timestamp=utc_timestamp())


async def main():
    tasks = [asyncio.create_task(create_webserver('meetshare.main:app', port=app_port))]

    if enable_metrics:
        tasks.append(asyncio.create_task(create_webserver('meetshare.metrics:metrics', port=metrics_port)))

    await asyncio.wait(tasks, return_when=asyncio.ALL_COMPLETED)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except Exception as e:
        print(e)
        sys.exit(0)
    except KeyboardInterrupt:
        pass
