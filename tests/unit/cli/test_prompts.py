"""Tests for interactive prompts."""

from unittest.mock import MagicMock, patch

import click
import pytest

from omnizm.cli.prompts import (
    EMPTY_SELECTION_MESSAGE,
    _validate_checkbox,
    multiselect_components,
    parse_multiselect,
    select_stack,
)

OPTIONS = ["alert", "button", "card"]


def _answer(value: object) -> MagicMock:
    question = MagicMock()
    question.ask.return_value = value
    return question


def test_parse_numbers() -> None:
    assert parse_multiselect("1,3", OPTIONS) == ["alert", "card"]


def test_parse_names_and_spaces() -> None:
    assert parse_multiselect("card button", OPTIONS) == ["card", "button"]


def test_parse_mixed_tokens_keeps_order_and_dedupes() -> None:
    assert parse_multiselect("2, card, button 3", OPTIONS) == ["button", "card"]


def test_parse_numeric_component_name_matches_by_name() -> None:
    assert parse_multiselect("404", ["404", "button"]) == ["404"]


def test_parse_number_still_selects_by_position_when_not_a_name() -> None:
    assert parse_multiselect("2", ["404", "button"]) == ["button"]


@pytest.mark.parametrize("value", ["0", "4", "dialog", " , "])
def test_parse_rejects_invalid_selection(value: str) -> None:
    with pytest.raises(click.BadParameter):
        parse_multiselect(value, OPTIONS)


def test_checkbox_validation_requires_a_selection() -> None:
    assert _validate_checkbox([]) == EMPTY_SELECTION_MESSAGE
    assert _validate_checkbox(["card"]) is True


def test_select_stack_uses_questionary_on_a_terminal() -> None:
    with (
        patch("omnizm.cli.prompts._is_interactive", return_value=True),
        patch("omnizm.cli.prompts.questionary.select", return_value=_answer("remix")) as select,
    ):
        assert select_stack() == "remix"

    choices = select.call_args.kwargs["choices"]
    assert [choice.value for choice in choices] == ["nextjs", "svelte", "remix", "astro"]


def test_select_stack_cancelled_on_a_terminal_exits_1() -> None:
    with (
        patch("omnizm.cli.prompts._is_interactive", return_value=True),
        patch("omnizm.cli.prompts.questionary.select", return_value=_answer(None)),
        pytest.raises(SystemExit) as exc_info,
    ):
        select_stack()

    assert exc_info.value.code == 1


def test_multiselect_uses_questionary_checkbox_on_a_terminal() -> None:
    with (
        patch("omnizm.cli.prompts._is_interactive", return_value=True),
        patch(
            "omnizm.cli.prompts.questionary.checkbox", return_value=_answer(["card", "alert"])
        ) as checkbox,
    ):
        assert multiselect_components(OPTIONS) == ["card", "alert"]

    kwargs = checkbox.call_args.kwargs
    assert [choice.value for choice in kwargs["choices"]] == OPTIONS
    assert kwargs["validate"]([]) == EMPTY_SELECTION_MESSAGE


def test_multiselect_cancelled_on_a_terminal_exits_1() -> None:
    with (
        patch("omnizm.cli.prompts._is_interactive", return_value=True),
        patch("omnizm.cli.prompts.questionary.checkbox", return_value=_answer(None)),
        pytest.raises(SystemExit) as exc_info,
    ):
        multiselect_components(OPTIONS)

    assert exc_info.value.code == 1
