from fastapi_versionizer.versionizer import Versionizer

from meetshare.logs import get_logger
from meetshare.utils import create_app

from .processor import initialize as initialize_sharing
from .v1.router import router as v1_router

log = get_logger(__name__)

app = create_app()
app.include_router(v1_router)

Versionizer(app=app, prefix_format='/v{major}', sort_routes=True).versionize()


async def app_startup():
    initialize_sharing()
    log.info('sharing module initialized')


__all__ = ['app', 'app_startup']
