"""Tests for template placeholder substitution."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import referenced_variables, render_template
from app.domain.exceptions import MissingVariableError


def test_render_replaces_placeholders_with_spacing() -> None:
    text = "Hi {{ name }}, your {{service}} is on {{date}}."

    rendered = render_template(text, {"name": "Ana", "service": "Haircut", "date": "Friday"})

    assert rendered == "Hi Ana, your Haircut is on Friday."


def test_render_converts_values_to_text() -> None:
    assert render_template("Total: {{amount}}", {"amount": 42.5}) == "Total: 42.5"


def test_render_missing_binding_raises() -> None:
    with pytest.raises(MissingVariableError) as excinfo:
        render_template("Hello {{name}}", {})

    assert excinfo.value.variable == "name"
    assert excinfo.value.code == "MissingVariable"


def test_render_empty_text_returns_empty_string() -> None:
    assert render_template(None, {}) == ""
    assert render_template("", {"unused": 1}) == ""


def test_unused_bindings_are_ignored() -> None:
    assert render_template("Static text", {"name": "Ana"}) == "Static text"


def test_referenced_variables_preserves_first_appearance_order() -> None:
    text = "{{b}} then {{a}} then {{ b }}"

    assert referenced_variables(text) == ["b", "a"]
