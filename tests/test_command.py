"""Tests for command module."""
import pytest

from clidle.command import Command, CommandKind, parse_order


def test_factories():
    assert Command.enter_buy_mode().kind is CommandKind.ENTER_BUY_MODE
    assert Command.enter_sell_mode().kind is CommandKind.ENTER_SELL_MODE
    assert Command.add_resource_unit().kind is CommandKind.ADD_RESOURCE_UNIT
    assert Command.quit().kind is CommandKind.QUIT
    assert Command.delete_char().kind is CommandKind.DELETE_CHAR
    assert Command.cancel().kind is CommandKind.CANCEL
    assert Command.submit().kind is CommandKind.SUBMIT


def test_append_char():
    cmd = Command.append_char("x")
    assert cmd.kind is CommandKind.APPEND_CHAR
    assert cmd.char == "x"


def test_append_char_needs_one_character():
    with pytest.raises(ValueError, match="exactly one character"):
        Command.append_char("xy")
    with pytest.raises(ValueError):
        Command.append_char("")


def test_type_text():
    cmds = Command.type_text("ab")
    assert cmds == [Command.append_char("a"), Command.append_char("b")]


def test_commands_compare_by_value():
    assert Command.submit() == Command.submit()
    assert Command.append_char("a") != Command.append_char("b")


def test_parse_name_only():
    assert parse_order("intern") == ("intern", 1)


def test_parse_name_and_quantity():
    assert parse_order("intern 5") == ("intern", 5)


def test_parse_extra_whitespace():
    assert parse_order("  intern \t 3  ") == ("intern", 3)


def test_parse_unparsable_quantity_defaults_to_one():
    assert parse_order("intern lots") == ("intern", 1)
    assert parse_order("intern 2.5") == ("intern", 1)


def test_parse_non_positive_quantity_defaults_to_one():
    assert parse_order("intern 0") == ("intern", 1)
    assert parse_order("intern -4") == ("intern", 1)


def test_parse_ignores_extra_tokens():
    assert parse_order("intern 2 please") == ("intern", 2)


def test_parse_empty():
    assert parse_order("") == ("", 1)
    assert parse_order("   ") == ("", 1)
