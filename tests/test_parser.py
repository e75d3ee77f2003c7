import pytest

from assignlang import Parser, Token, Type, run, tokenize
from assignlang.error.parser_error import (  # isort:skip
    NestingTooDeepError,
    ParserException,
    UnclosedBracketError,
    UndefinedSymbolError,
    UndefinedSymbolException,
    UnexpectedTokenError,
)
from tests.test_util import data_path, execute, open_file


def parse(program: str):
    output = []
    symbols = {}
    parser = Parser(program)
    parser.run(tokenize(program), symbols, output.append)
    return parser, output, symbols


def test_parser(precedence_program: str):
    # Ensure that we can scan and parse this program without Exceptions
    _, output, symbols = parse(precedence_program)
    assert output == ["a = 14", "b = 14", "c = 3", "d = 23", "e = 14"]
    assert symbols == {"a": 14, "b": 14, "c": 3, "d": 23, "e": 14}


def test_cursor_stops_at_end(basic_program: str):
    parser, _, _ = parse(basic_program)
    assert parser.current_token().type == Type.END
    assert parser.index == len(parser.tokens) - 1

    # Reading at the END token keeps the cursor in place
    parser.read_next()
    assert parser.index == len(parser.tokens) - 1


def test_missing_end_token():
    with pytest.raises(ValueError):
        run([Token("x", Type.ID)], {})

    with pytest.raises(ValueError):
        run([], {})


def test_run_function(capsys):
    symbols = {}
    run(tokenize("x = 5; y = x + 3;"), symbols)
    assert capsys.readouterr().out == "x = 5\ny = 8\n"
    assert symbols == {"x": 5, "y": 8}


def test_UnclosedBracketError():
    program: str = open_file(data_path("parseError", "UnclosedBracket.al"))

    with pytest.raises(ParserException) as excinfo:
        parse(program)

    error = excinfo.value.error
    assert isinstance(error, UnclosedBracketError)
    # The error is found at the ';' that takes the place of the ')'
    assert error.got == Token(";", Type.SEMICOLON)
    assert error.span.col == (10, 11)
    assert str(excinfo.value) == (
        "Parser error: Mismatched parenthesis, expected ')' to close the '(' on line [1] column 5, "
        "but got ';' on line [1] column 11."
    )


def test_UndefinedSymbolError():
    program: str = open_file(data_path("parseError", "UndefinedSymbol.al"))

    output = []
    with pytest.raises(UndefinedSymbolException) as excinfo:
        Parser(program).run(tokenize(program), {}, output.append)

    # Statements before the error have already been evaluated
    assert output == ["x = 1"]
    assert isinstance(excinfo.value.error, UndefinedSymbolError)
    assert str(excinfo.value) == "Parser error: Symbol 'z' not defined on line [2] column 5."
    assert "-> 2. y = z;" in excinfo.value.error.context(color=False)


def test_undefined_symbol_is_parser_exception():
    with pytest.raises(ParserException):
        execute("y = x;")


def test_self_reference_is_undefined():
    # The variable only exists once its assignment has been fully evaluated
    with pytest.raises(UndefinedSymbolException):
        execute("x = x + 1;")


def test_missing_semicolon():
    program: str = open_file(data_path("parseError", "MissingSemicolon.al"))

    with pytest.raises(ParserException) as excinfo:
        parse(program)

    error = excinfo.value.error
    assert isinstance(error, UnexpectedTokenError)
    assert error.expected == [";"]
    assert error.got == Token("y", Type.ID)
    assert str(excinfo.value) == "Parser error: Expected ';', but got 'y' on line [2] column 1."


def test_missing_identifier():
    program: str = open_file(data_path("parseError", "MissingIdentifier.al"))

    output = []
    with pytest.raises(ParserException) as excinfo:
        Parser(program).run(tokenize(program), {}, output.append)

    assert output == ["x = 1"]
    assert excinfo.value.error.expected == [Type.ID]
    assert "Expected an identifier, but got '='" in str(excinfo.value)


def test_missing_assign():
    with pytest.raises(ParserException) as excinfo:
        execute(open_file(data_path("parseError", "MissingAssign.al")))
    assert excinfo.value.error.expected == ["="]
    assert excinfo.value.error.got == Token("1", Type.INT)


def test_missing_operand():
    with pytest.raises(ParserException) as excinfo:
        execute(open_file(data_path("parseError", "MissingOperand.al")))
    error = excinfo.value.error
    assert isinstance(error, UnexpectedTokenError)
    assert error.got == Token(";", Type.SEMICOLON)
    assert str(excinfo.value).startswith(
        "Parser error: Expected a '(' or '+' or '-' or an integer or an identifier, but got ';'"
    )


def test_unexpected_end():
    with pytest.raises(ParserException) as excinfo:
        execute("x = 1")
    assert excinfo.value.error.got.type == Type.END
    assert "but got end of program" in str(excinfo.value)


@pytest.mark.parametrize(
    "program",
    [
        "x = 1;)",
        "x = (1 + 2));",
        "x = 1 2;",
        "x = ();",
        "x == 1;",
        "1 = x;",
        "x = 1 +* 2;",
        "x = 1;;",
    ],
)
def test_syntax_errors(program: str):
    with pytest.raises(ParserException) as excinfo:
        execute(program)
    assert not isinstance(excinfo.value, UndefinedSymbolException)


def test_parse_errors(parse_error_file: str):
    program: str = open_file(parse_error_file)
    with pytest.raises(ParserException) as excinfo:
        execute(program)
    assert str(excinfo.value).startswith("Parser error: ")


def test_deep_nesting():
    depth = 500
    program = "x = " + "(" * depth + "1" + ")" * depth + ";"
    output, _ = execute(program)
    assert output == ["x = 1"]


def test_NestingTooDeepError():
    depth = 10000
    program = "x = " + "(" * depth + "1" + ")" * depth + ";"
    with pytest.raises(ParserException) as excinfo:
        execute(program)
    assert isinstance(excinfo.value.error, NestingTooDeepError)


def test_long_operator_chain():
    # Accumulating operators do not recurse, so long chains are fine
    output, _ = execute("x = " + " + ".join(["1"] * 20000) + ";")
    assert output == ["x = 20000"]
