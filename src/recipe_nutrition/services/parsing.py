"""Parsing of nutrient sets from free-form model output."""

import json

from recipe_nutrition.domain.nutrition import NutrientSet
from recipe_nutrition.errors import ProviderError


def extract_json_object(text: str) -> str | None:
    """Return the first balanced ``{...}`` span in the text, if any."""
    start = text.find("{")
    while start != -1:
        end = _match_closing_brace(text, start)
        if end is not None:
            candidate = text[start : end + 1]
            try:
                json.loads(candidate)
            except json.JSONDecodeError:
                pass
            else:
                return candidate
        start = text.find("{", start + 1)
    return None


def _match_closing_brace(text: str, start: int) -> int | None:
    """Find the brace closing the one at ``start``, skipping string literals."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def parse_nutrient_set(text: str, provider: str) -> NutrientSet:
    """Extract and validate the eight-field nutrient object from model text."""
    if not isinstance(text, str):
        raise ProviderError(provider, "Could not parse nutrition JSON from response")
    raw = extract_json_object(text)
    if raw is None:
        raise ProviderError(provider, "Could not parse nutrition JSON from response")
    payload = json.loads(raw)
    try:
        return NutrientSet.from_payload(payload)
    except ValueError as exc:
        raise ProviderError(provider, str(exc)) from exc
