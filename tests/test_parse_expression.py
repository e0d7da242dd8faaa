from cron_expander.core.errors import ExpressionError, FieldError
from cron_expander.core.model import Expression, Field
from cron_expander.core.parse.parse_expression import parse, parse_expression


def test_parse_example():
    expr, err = parse_expression("*/15 0 1,15 * 1-5 /usr/bin/find")
    assert err is None
    assert expr == Expression(
        minute=(0, 15, 30, 45),
        hour=(0,),
        day_of_month=(1, 15),
        month=tuple(range(1, 13)),
        day_of_week=(1, 2, 3, 4, 5),
        command="/usr/bin/find",
    )


def test_parse_all_wildcards():
    expr = parse("* * * * * /bin/test")
    assert expr.minute == tuple(range(0, 60))
    assert expr.hour == tuple(range(0, 24))
    assert expr.day_of_month == tuple(range(1, 32))
    assert expr.month == tuple(range(1, 13))
    assert expr.day_of_week == (1, 2, 3, 4, 5, 6, 7)


def test_parse_names():
    expr = parse("0 0 1 jaN SuN /bin/names")
    assert expr.month == (1,)
    assert expr.day_of_week == (7,)


def test_command_is_verbatim():
    expr = parse('0 0 1 1 1 echo "hello, world!"')
    assert expr.command == 'echo "hello, world!"'

    expr = parse("0 0 1 1 1 a  b   c ")
    assert expr.command == "a  b   c "


def test_values_by_field():
    expr = parse("*/100 0 1 1 1 /bin/test")
    assert expr.values(Field.MINUTE) == (0,)
    assert expr.values(Field.DAY_OF_WEEK) == (1,)


def test_missing_command_is_invalid_expression():
    for line in ["", "* * * * *", "0 0 1 1"]:
        expr, err = parse_expression(line)
        assert expr is None
        assert isinstance(err, ExpressionError)
        assert err.code == "E_INVALID_EXPRESSION"
        assert str(err) == "<expression>: E_INVALID_EXPRESSION: invalid expression"


def test_double_space_shifts_fields():
    # Single-space separation: an empty field token is an invalid value.
    _, err = parse_expression("0  0 1 1 1 /bin/test")
    assert err is not None
    assert err.code == "E_INVALID_VALUE"
    assert err.field == 1


def test_first_failing_field_aborts():
    expr, err = parse_expression("a b c d e /bin/test")
    assert expr is None
    assert isinstance(err, FieldError)
    assert err.field == 0
    assert err.message == "invalid value: a"


def test_out_of_range_reports_field_index():
    _, err = parse_expression("123 0 1 1 1 /bin/test")
    assert err is not None
    assert str(err) == "field 0: E_OUT_OF_RANGE: outside of range: 0-59"

    _, err = parse_expression("0 0 1,32 1 1 /bin/test")
    assert err is not None
    assert "field 2" in str(err)
    assert "outside of range: 1-31" in str(err)


def test_parse_raises_on_error():
    try:
        parse("0 0 1 1-5/x 1 /bin/test")
        assert False, "expected FieldError"
    except FieldError as e:
        assert e.code == "E_INVALID_STEP_RANGE"
        assert e.field == 3
