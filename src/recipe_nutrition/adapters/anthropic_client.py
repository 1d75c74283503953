"""Anthropic Messages API client for nutrition estimates."""

from dataclasses import dataclass

import anthropic
from anthropic import AsyncAnthropic

from recipe_nutrition.domain.nutrition import NutrientSet
from recipe_nutrition.errors import ProviderError
from recipe_nutrition.services.analysis import NutritionModelClient
from recipe_nutrition.services.parsing import parse_nutrient_set

DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"


@dataclass
class AnthropicNutritionClient(NutritionModelClient):
    """Nutrition model client backed by the Anthropic Messages API."""

    client: AsyncAnthropic
    model: str = DEFAULT_ANTHROPIC_MODEL
    temperature: float = 0.1
    max_output_tokens: int = 500
    name: str = "claude"

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        *,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        base_url: str | None = None,
        temperature: float = 0.1,
        max_output_tokens: int = 500,
        timeout_seconds: float = 55.0,
    ) -> "AnthropicNutritionClient":
        """Create an Anthropic client; retries are left to the caller."""
        return cls(
            client=AsyncAnthropic(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout_seconds,
                max_retries=0,
            ),
            model=model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

    async def analyze(self, prompt: str) -> NutrientSet:
        """Send the prompt as a single user message and parse the reply."""
        text = await self._complete(prompt)
        return parse_nutrient_set(text, self.name)

    async def _complete(self, prompt: str) -> str:
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_output_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as exc:
            raise ProviderError(
                self.name,
                f"Claude API error ({exc.status_code}): {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except anthropic.APIConnectionError as exc:
            raise ProviderError(
                self.name, f"Transport error calling Claude: {exc}", transient=True
            ) from exc
        except anthropic.APIError as exc:
            raise ProviderError(self.name, f"Claude API error: {exc}") from exc

        content = getattr(message, "content", None)
        if not isinstance(content, list):
            raise ProviderError(self.name, "Unexpected response envelope from Claude")
        for block in content:
            text = getattr(block, "text", None)
            if getattr(block, "type", None) != "text":
                continue
            if isinstance(text, str) and text:
                return text
        raise ProviderError(self.name, "No text response from Claude")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
