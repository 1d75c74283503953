"""Tests for parsing nutrient sets from model output."""

import json

import pytest

from recipe_nutrition.errors import ProviderError
from recipe_nutrition.services.parsing import extract_json_object, parse_nutrient_set

_VALID = {
    "calories": 305,
    "protein": 24.3,
    "fat": 10.1,
    "saturated_fat": 3.2,
    "carbs": 29.8,
    "sugars": 2.1,
    "fiber": 0.8,
    "sodium": 609,
}


def test_parse_strips_preamble_and_postamble() -> None:
    text = f"Here is the analysis:\n{json.dumps(_VALID)}\nLet me know if you need more."

    result = parse_nutrient_set(text, "claude")

    assert result.calories == 305
    assert result.saturated_fat == 3.2
    assert result.sodium == 609


def test_extract_ignores_braces_inside_strings() -> None:
    payload = {"note": "values {approx}", **_VALID}
    text = f"```json\n{json.dumps(payload)}\n```"

    extracted = extract_json_object(text)

    assert extracted is not None
    assert json.loads(extracted)["note"] == "values {approx}"


def test_extract_skips_non_json_brace_text() -> None:
    text = "Totals {per serving} follow: " + json.dumps(_VALID)

    extracted = extract_json_object(text)

    assert extracted is not None
    assert json.loads(extracted) == _VALID


def test_extract_returns_none_for_unbalanced_text() -> None:
    assert extract_json_object('{"calories": 300') is None
    assert extract_json_object("no json here") is None


def test_parse_without_json_raises_provider_error() -> None:
    with pytest.raises(ProviderError) as exc_info:
        parse_nutrient_set("I cannot help with that.", "gemini")

    assert exc_info.value.provider == "gemini"
    assert "Could not parse nutrition JSON" in exc_info.value.message


def test_parse_missing_field_names_field() -> None:
    payload = dict(_VALID)
    payload.pop("fiber")

    with pytest.raises(ProviderError, match="Missing or invalid field: fiber"):
        parse_nutrient_set(json.dumps(payload), "claude")


def test_parse_rejects_non_numeric_field() -> None:
    payload = {**_VALID, "sodium": "609mg"}

    with pytest.raises(ProviderError, match="Missing or invalid field: sodium"):
        parse_nutrient_set(json.dumps(payload), "claude")


def test_parse_rejects_boolean_field() -> None:
    payload = {**_VALID, "fiber": True}

    with pytest.raises(ProviderError, match="fiber"):
        parse_nutrient_set(json.dumps(payload), "claude")


def test_extract_moves_past_unclosed_brace() -> None:
    text = "Estimate {rough: " + json.dumps(_VALID)

    extracted = extract_json_object(text)

    assert extracted is not None
    assert json.loads(extracted) == _VALID


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_parse_rejects_non_finite_field(literal: str) -> None:
    text = json.dumps(_VALID).replace('"calories": 305', f'"calories": {literal}')

    with pytest.raises(ProviderError, match="Missing or invalid field: calories"):
        parse_nutrient_set(text, "claude")


def test_parse_rejects_non_string_text() -> None:
    with pytest.raises(ProviderError, match="Could not parse nutrition JSON"):
        parse_nutrient_set(42, "gemini")  # type: ignore[arg-type]
