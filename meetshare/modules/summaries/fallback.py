import re
from typing import Optional

from meetshare.constants import (
    bullet,
    custom_instructions_prefix,
    max_summary_points,
    min_fragment_length,
    summary_header,
    trimmed_whitespace,
)

sentence_terminators = re.compile(r'[.!?]+')


def get_key_points(transcript: str) -> list[str]:
    fragments = [fragment.strip(trimmed_whitespace) for fragment in sentence_terminators.split(transcript)]

    return [fragment for fragment in fragments if len(fragment) > min_fragment_length][:max_summary_points]


def simple_summary(transcript: str, custom_prompt: Optional[str] = None) -> str:
    """
    Builds a bulleted summary out of the first sentences of the transcript, without calling out to any service.
    """

    key_points = [f'{bullet} {point}' for point in get_key_points(transcript)]
    summary = f'{summary_header}\n' + '\n'.join(key_points)

    if custom_prompt:
        summary = f'{custom_instructions_prefix} {custom_prompt}\n\n{summary}'

    return summary
