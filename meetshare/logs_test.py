import logging

from meetshare.logs import AccessLogSuppressor, mask_secret, quiet_loggers, uvicorn_log_config


def access_record(path: str) -> logging.LogRecord:
    return logging.LogRecord(
        'uvicorn.access', logging.INFO, __file__, 1, '%s - "%s %s HTTP/%s" %d', ('127.0.0.1:5000', 'GET', path, '1.1', 200), None
    )


class TestAccessLogSuppressor:
    def test_suppresses_health_and_metrics_requests(self):
        '''Test that health checks and metrics scrapes are kept out of the access log.'''

        suppressor = AccessLogSuppressor()

        assert not suppressor.filter(access_record('/healthz'))
        assert not suppressor.filter(access_record('/metrics'))
        assert not suppressor.filter(access_record('/favicon.ico'))

    def test_keeps_api_requests(self):
        suppressor = AccessLogSuppressor()

        assert suppressor.filter(access_record('/summaries/v1/summarize'))
        assert suppressor.filter(access_record('/sharing/v1/share'))

    def test_is_wired_into_uvicorn_config(self):
        assert 'suppress_noise' in uvicorn_log_config['handlers']['access']['filters']


class TestMaskSecret:
    def test_masks_secret(self):
        assert mask_secret('SG.abcdefghijklmnop') == 'SG.ab...'

    def test_missing_secret(self):
        assert mask_secret(None) == 'NOT SET'
        assert mask_secret('') == 'NOT SET'


class TestQuietLoggers:
    def test_http_client_loggers_are_quiet(self):
        for name in quiet_loggers:
            assert logging.getLogger(name).level >= logging.WARNING
