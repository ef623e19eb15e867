from meetshare.env import enable_metrics, modules
from meetshare.logs import get_logger
from meetshare.modules.monitoring import (
    instrumentator,
    PROMETHEUS_NAMESPACE,
    PROMETHEUS_SHARING_SUBSYSTEM,
    PROMETHEUS_SUMMARIES_SUBSYSTEM,
)
from meetshare.utils import create_app

log = get_logger(__name__)
metrics = create_app()

if enable_metrics:

    @metrics.get('/healthz')
    def health():
        '''
        Health checking.
        '''

        return {'status': 'ok'}

    if 'summaries' in modules:
        from meetshare.modules.summaries.app import app as summaries_app

        instrumentator.instrument(
            summaries_app, metric_namespace=PROMETHEUS_NAMESPACE, metric_subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM
        )

    if 'sharing' in modules:
        from meetshare.modules.sharing.app import app as sharing_app

        instrumentator.instrument(
            sharing_app, metric_namespace=PROMETHEUS_NAMESPACE, metric_subsystem=PROMETHEUS_SHARING_SUBSYSTEM
        )

    instrumentator.expose(metrics)
