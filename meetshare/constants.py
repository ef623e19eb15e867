from enum import Enum

bullet = '•'
summary_header = 'Summary:'
custom_instructions_prefix = 'Custom Instructions:'

# fragments with this many characters or fewer, once trimmed, are noise
min_fragment_length = 10
max_summary_points = 5

default_subject = 'Meeting Summary Shared'
sendgrid_key_prefix = 'SG.'
allowed_transcript_content_types = ('text/plain', 'text/markdown')

# the characters a browser strips when trimming text, byte order mark included
trimmed_whitespace = (
    '\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000\ufeff'
)


class SummaryProviders(Enum):
    COMPLETION = 'COMPLETION'
    FALLBACK = 'FALLBACK'


class DeliveryProviders(Enum):
    SENDGRID = 'SENDGRID'
    LOG = 'LOG'
