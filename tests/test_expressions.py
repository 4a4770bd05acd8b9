import io

import pytest

from weiss.expressions import (
    ClosePar,
    Language,
    Number,
    OpenPar,
    Operator,
    calc_postfix,
    infix_to_postfix,
    is_balanced,
    symbol_factory,
)


@pytest.mark.parametrize(
    "text, language, expected",
    [
        ("begin ( [ { } ] ) end", Language.PASCAL, True),
        ("( [ { ) } ] )", Language.PASCAL, False),
        ("/* [ ( [ ] ) ] */", Language.CPP, True),
        ("/* [ ( [ ] ) */", Language.CPP, False),
    ],
)
def test_is_balanced(text, language, expected):
    assert is_balanced(text, language) is expected


def test_is_balanced_empty_text():
    assert is_balanced("", Language.PASCAL) is True


def test_calc_postfix_basic():
    assert calc_postfix("1 2 +") == 3
    assert calc_postfix("1 2 + 4 * 2 / 1 -") == 5


def test_calc_postfix_leftover_raises():
    with pytest.raises(ValueError):
        calc_postfix("1 1")


def test_calc_postfix_missing_operand_raises():
    with pytest.raises(ValueError):
        calc_postfix("1 +")


def test_calc_postfix_bad_token_raises():
    with pytest.raises(ValueError):
        calc_postfix("1 x +")


def test_calc_postfix_division_truncates_toward_zero():
    assert calc_postfix("-7 2 /") == -3


def test_calc_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calc_postfix("1 0 /")


@pytest.mark.parametrize(
    "infix, postfix",
    [
        ("1 + 2 * 3 - 4", "1 2 3 * + 4 - "),
        ("( 1 + 2 ) * 3", "1 2 + 3 * "),
        ("1 + 2 ^ 3 * 4", "1 2 3 ^ 4 * + "),
    ],
)
def test_infix_to_postfix(infix, postfix):
    assert infix_to_postfix(infix) == postfix


@pytest.mark.parametrize(
    "infix, postfix",
    [
        ("1 + 2 * 3 - 4", "1 2 3 * + 4 - "),
        ("( 1 + 2 ) * 3", "1 2 + 3 * "),
    ],
)
def test_converted_expression_evaluates_like_reference(infix, postfix):
    assert calc_postfix(infix_to_postfix(infix)) == calc_postfix(postfix)


def test_infix_unbalanced_close_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("1 + 2 )")


def test_symbol_factory_kinds_and_precedence():
    star = symbol_factory("*")
    assert isinstance(star, Operator) and star.precedence == 2
    hat = symbol_factory("^")
    assert isinstance(hat, Operator) and hat.precedence == 3
    open_par = symbol_factory("(")
    assert isinstance(open_par, OpenPar) and open_par.is_open_par()
    close_par = symbol_factory(")")
    assert isinstance(close_par, ClosePar) and not close_par.is_open_par()
    number = symbol_factory("42")
    assert isinstance(number, Number) and number.precedence == 0
    assert number.token == "42"


def test_number_on_read_writes_token():
    out = io.StringIO()
    stack = []
    assert symbol_factory("7").on_read(out, stack) is False
    assert out.getvalue() == "7 "
    assert stack == []


def test_operator_pops_higher_precedence():
    out = io.StringIO()
    stack = [symbol_factory("*")]
    assert symbol_factory("+").on_read(out, stack) is True
    assert out.getvalue() == "* "
    assert stack == []