"""Blog draft generation backends.

The generator is an external collaborator: it gets a topic and a style and
returns a title and a body. Everything it raises is turned into
``GenerationFailed`` so callers deal with one condition.
"""

import logging
from dataclasses import dataclass

import anthropic
import httpx

from draftpress.config import Settings, get_settings
from draftpress.errors import GenerationFailed
from draftpress.models.post import TITLE_MAX_LENGTH
from draftpress.services.llm_prompts import (
    BLOG_SYSTEM_PROMPT,
    TITLE_SYSTEM_PROMPT,
    get_blog_prompt,
    get_title_prompt,
)

logger = logging.getLogger(__name__)


@dataclass
class GeneratedPost:
    """A generated title and body."""

    title: str
    content: str


def clean_title(raw: str, topic: str) -> str:
    """Strip quotes and whitespace from a model headline and cap its length."""
    lines = raw.replace('"', "").strip().splitlines()
    title = lines[0].strip() if lines else ""
    if not title:
        title = f"Blog Post About {topic}"
    return title[:TITLE_MAX_LENGTH].strip()


class BlogGenerator:
    """Base class for generation backends."""

    async def complete(
        self, prompt: str, system_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release any client held by the backend."""

    async def generate(self, topic: str, style: str) -> GeneratedPost:
        """Write a post body for ``topic`` in ``style``, then a headline for it."""
        try:
            content = await self.complete(
                get_blog_prompt(topic, style),
                system_prompt=BLOG_SYSTEM_PROMPT,
                max_tokens=1000,
                temperature=0.7,
            )
            if not content.strip():
                logger.error(f"Generator returned an empty post for topic {topic!r}")
                raise GenerationFailed()
            raw_title = await self.complete(
                get_title_prompt(content),
                system_prompt=TITLE_SYSTEM_PROMPT,
                max_tokens=50,
                temperature=0.7,
            )
        except GenerationFailed:
            raise
        except (httpx.HTTPError, anthropic.APIError, KeyError, ValueError) as e:
            logger.error(f"Blog generation failed for topic {topic!r}: {e}")
            raise GenerationFailed() from e

        return GeneratedPost(title=clean_title(raw_title, topic), content=content.strip())


class OllamaBlogGenerator(BlogGenerator):
    """Generator backed by an Ollama chat endpoint."""

    def __init__(self, base_url: str, model: str, timeout: float = 120.0) -> None:
        self.base_url = base_url
        self.model = model
        self.timeout = timeout

    async def complete(
        self, prompt: str, system_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                f"{self.base_url}/api/chat",
                json={
                    "model": self.model,
                    "messages": messages,
                    "stream": False,
                    "options": {
                        "temperature": temperature,
                        "num_predict": max_tokens,
                    },
                },
            )
            response.raise_for_status()
            data = response.json()
            return data["message"]["content"]


class AnthropicBlogGenerator(BlogGenerator):
    """Generator backed by the Anthropic Messages API."""

    def __init__(self, api_key: str, model: str, timeout: float = 120.0) -> None:
        self.model = model
        self.client = anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout)

    async def aclose(self) -> None:
        await self.client.close()

    async def complete(
        self, prompt: str, system_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        message = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": prompt}],
        )
        return "".join(block.text for block in message.content if block.type == "text")


def get_blog_generator(settings: Settings | None = None) -> BlogGenerator:
    """Build the generator selected by configuration."""
    settings = settings or get_settings()
    if settings.generation_provider == "anthropic":
        return AnthropicBlogGenerator(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            timeout=settings.generation_timeout_seconds,
        )
    return OllamaBlogGenerator(
        base_url=settings.ollama_base_url,
        model=settings.llm_model,
        timeout=settings.generation_timeout_seconds,
    )
