import os


# utilities
def tobool(val: str | None):
    if val is None:
        return False
    val = val.lower().strip()
    if val in ['y', 'yes', 'true', '1']:
        return True
    return False


# general
app_port = int(os.environ.get('MEETSHARE_PORT', 8000))
log_level = os.environ.get('LOG_LEVEL', 'DEBUG').strip().upper()
supported_modules = {'summaries', 'sharing'}
enabled_modules = set(os.environ.get('ENABLED_MODULES', 'summaries,sharing').split(','))
modules = supported_modules.intersection(enabled_modules)

# completion api (any openai compatible endpoint, groq by default)
groq_api_key = os.environ.get('GROQ_API_KEY')
completion_api_base_url = os.environ.get('COMPLETION_API_BASE_URL', 'https://api.groq.com/openai/v1')
completion_model = os.environ.get('COMPLETION_MODEL', 'llama3-8b-8192')
completion_temperature = float(os.environ.get('COMPLETION_TEMPERATURE', 0.7))
completion_max_tokens = int(os.environ.get('COMPLETION_MAX_TOKENS', 1000))
completion_timeout = float(os.environ.get('COMPLETION_TIMEOUT', 30))

# delivery api
sendgrid_api_key = os.environ.get('SENDGRID_API_KEY')
sendgrid_api_url = os.environ.get('SENDGRID_API_URL', 'https://api.sendgrid.com/v3/mail/send')
delivery_timeout = float(os.environ.get('DELIVERY_TIMEOUT', 15))

# summaries
# starlette caps non-file form fields at 1MB by default
transcript_max_part_size = int(os.environ.get('TRANSCRIPT_MAX_PART_SIZE', 100 * 1024 * 1024))

# sharing
share_default_sender = os.environ.get('SHARE_DEFAULT_SENDER', 'no-reply@meetshare.local')
share_simulated_delay = float(os.environ.get('SHARE_SIMULATED_DELAY', 1.0))

# monitoring
enable_metrics = tobool(os.environ.get('ENABLE_METRICS', 'true'))
metrics_port = int(os.environ.get('METRICS_PORT', 8001))
