from dataclasses import dataclass
from typing import List

from assignlang.error.error import InterpreterError, InterpreterException
from assignlang.token import Token
from assignlang.type import Type


class ParserException(InterpreterException):
    pass


# Referencing a variable that was never assigned
class UndefinedSymbolException(ParserException):
    pass


class ParserError(InterpreterError):
    component = "Parser"
    stage = ParserException


def got_str(token: Token) -> str:
    if token.type == Type.END:
        return str(Type.END)
    return repr(token.text)


@dataclass
class UnexpectedTokenError(ParserError):
    expected: List[Type | str]
    got: Token

    @property
    def message(self) -> str:
        expected = " or ".join(
            option.article_str() if isinstance(option, Type) else repr(option)
            for option in self.expected
        )
        return f"Expected {expected}, but got {got_str(self.got)} on {self.span.location_str}."


@dataclass
class UnclosedBracketError(ParserError):
    opened: Token
    got: Token

    @property
    def message(self) -> str:
        return (
            f"Mismatched parenthesis, expected ')' to close the '(' on {self.opened.span.location_str}, "
            f"but got {got_str(self.got)} on {self.span.location_str}."
        )


@dataclass
class UndefinedSymbolError(ParserError):
    symbol: Token

    stage = UndefinedSymbolException

    @property
    def message(self) -> str:
        return f"Symbol {self.symbol.text!r} not defined on {self.span.location_str}."


class NestingTooDeepError(ParserError):
    @property
    def message(self) -> str:
        return f"Expression nested too deeply on {self.span.location_str}."
