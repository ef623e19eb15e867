from typing import Optional

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from meetshare.constants import SummaryProviders
from meetshare.env import (
    completion_api_base_url,
    completion_max_tokens,
    completion_model,
    completion_temperature,
    completion_timeout,
    groq_api_key,
)
from meetshare.logs import get_logger, mask_secret

from .fallback import simple_summary
from .prompts import default_instructions, human_message, system_message

log = get_logger(__name__)


def get_prompt() -> ChatPromptTemplate:
    return ChatPromptTemplate(
        [
            ("system", system_message),
            ("human", human_message),
        ]
    )


class SummaryProvider:
    name: SummaryProviders

    async def summarize(self, transcript: str, custom_prompt: Optional[str] = None) -> str:
        raise NotImplementedError


class FallbackSummaryProvider(SummaryProvider):
    name = SummaryProviders.FALLBACK

    async def summarize(self, transcript: str, custom_prompt: Optional[str] = None) -> str:
        return simple_summary(transcript, custom_prompt)


class CompletionSummaryProvider(SummaryProvider):
    name = SummaryProviders.COMPLETION

    def __init__(self, api_key: str):
        self.llm = ChatOpenAI(
            api_key=api_key,
            base_url=completion_api_base_url,
            max_completion_tokens=completion_max_tokens,
            max_retries=0,
            model=completion_model,
            temperature=completion_temperature,
            timeout=completion_timeout,
        )

    async def summarize(self, transcript: str, custom_prompt: Optional[str] = None) -> str:
        chain = get_prompt() | self.llm | StrOutputParser()

        return await chain.ainvoke({'transcript': transcript, 'instructions': custom_prompt or default_instructions})


def select_summary_provider(api_key: Optional[str] = groq_api_key) -> SummaryProvider:
    if api_key:
        log.info(f'Forwarding summaries to {completion_model} at {completion_api_base_url} ({mask_secret(api_key)})')

        return CompletionSummaryProvider(api_key)

    log.info('No completion API key configured, summaries will be generated locally')

    return FallbackSummaryProvider()


fallback_provider = FallbackSummaryProvider()
