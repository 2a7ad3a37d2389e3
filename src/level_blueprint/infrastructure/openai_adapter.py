"""OpenAI adapter — implements the LlmGateway port."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from level_blueprint.domain.exceptions import TransportError, UpstreamError

logger = logging.getLogger(__name__)


class OpenAIAdapter:
    """Concrete ``LlmGateway`` backed by the OpenAI chat-completions API.

    A client is built per call around the caller's key.  When *http_client*
    is given its connection pool is shared across calls and owned by the
    caller; otherwise each call opens and closes its own.
    """

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        *,
        base_url: str = "https://api.openai.com/v1",
        temperature: float = 0.7,
        max_tokens: int = 2800,
        timeout: float = 600.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._model = model
        self._base_url = base_url
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout
        self._http_client = http_client

    async def complete(self, system_prompt: str, user_prompt: str, *, api_key: str) -> str:
        """Send a system + user prompt and return the completion text.

        A response envelope without ``choices[0].message.content`` yields an
        empty string rather than an error.
        """
        client = AsyncOpenAI(
            api_key=api_key,
            base_url=self._base_url,
            timeout=self._timeout,
            max_retries=0,
            http_client=self._http_client,
        )
        try:
            raw = await client.chat.completions.with_raw_response.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
            data = raw.http_response.json()

        except APIStatusError as exc:
            detail = exc.response.text
            logger.error("OpenAI API error (HTTP %s): %s", exc.status_code, detail)
            raise UpstreamError(detail, status_code=exc.status_code) from exc

        except APIConnectionError as exc:
            logger.error("OpenAI request failed: %s", exc)
            raise TransportError(str(exc)) from exc

        except ValueError as exc:
            logger.error("OpenAI returned a non-JSON body: %s", exc)
            raise TransportError(str(exc)) from exc

        finally:
            if self._http_client is None:
                await client.close()

        return _first_message_content(data)


def _first_message_content(data: Any) -> str:
    """Pull ``choices[0].message.content`` out of a raw completion envelope."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None

    if not isinstance(content, str):
        logger.warning("Completion envelope has no message content; returning empty text")
        return ""
    return content
