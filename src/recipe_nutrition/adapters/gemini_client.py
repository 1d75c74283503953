"""Google Gemini client for nutrition estimates."""

from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors, types

from recipe_nutrition.domain.nutrition import NutrientSet
from recipe_nutrition.errors import ProviderError
from recipe_nutrition.services.analysis import NutritionModelClient
from recipe_nutrition.services.parsing import parse_nutrient_set

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"


@dataclass
class GeminiNutritionClient(NutritionModelClient):
    """Nutrition model client backed by the google-genai SDK."""

    client: genai.Client
    model: str = DEFAULT_GEMINI_MODEL
    temperature: float = 0.1
    max_output_tokens: int = 500
    name: str = "gemini"

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        *,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str | None = None,
        temperature: float = 0.1,
        max_output_tokens: int = 500,
        timeout_seconds: float = 55.0,
    ) -> "GeminiNutritionClient":
        """Create a Gemini client with an API key."""
        http_options = types.HttpOptions(
            base_url=base_url, timeout=int(timeout_seconds * 1000)
        )
        return cls(
            client=genai.Client(api_key=api_key, http_options=http_options),
            model=model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

    async def analyze(self, prompt: str) -> NutrientSet:
        """Send the prompt and parse the first candidate's text."""
        text = await self._generate(prompt)
        return parse_nutrient_set(text, self.name)

    async def _generate(self, prompt: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except errors.APIError as exc:
            raise ProviderError(
                self.name,
                f"Gemini API error ({exc.code}): {exc.message}",
                status_code=exc.code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                self.name, f"Transport error calling Gemini: {exc}", transient=True
            ) from exc

        text = _first_candidate_text(response)
        if not text:
            raise ProviderError(self.name, "No text response from Gemini")
        return text

    async def close(self) -> None:
        """Close the underlying async HTTP session."""
        await self.client.aio.aclose()


def _first_candidate_text(response: object) -> str | None:
    """Return candidates[0].content.parts[0].text when it is a string."""
    candidates = getattr(response, "candidates", None)
    if not isinstance(candidates, list) or not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not isinstance(parts, list) or not parts:
        return None
    text = getattr(parts[0], "text", None)
    if not isinstance(text, str):
        return None
    return text
