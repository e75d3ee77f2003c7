from typing import Callable, List, MutableMapping

from assignlang.token import Token
from assignlang.type import Type

from assignlang.error.parser_error import (  # isort:skip
    NestingTooDeepError,
    UnclosedBracketError,
    UndefinedSymbolError,
    UnexpectedTokenError,
)


class Parser:
    """Recursive descent parser that evaluates the program while recognizing it.

    Every production of the grammar is a method. The expression productions return
    the value of the construct they recognized, so no syntax tree is ever built:

        program     := assignment program | ε
        assignment  := ID '=' exp ';'
        exp         := term exp'
        exp'        := '+' term exp' | '-' term exp' | ε
        term        := fact term'
        term'       := '*' fact term' | ε
        fact        := '(' exp ')' | '+' exp | '-' exp | INT | ID
    """

    def __init__(self, program: str) -> None:
        self.og_program = program
        self.tokens: List[Token] = []
        self.index = 0
        self.symbols: MutableMapping[str, int] = {}
        self.emit: Callable[[str], None] = print

    def run(
        self,
        tokens: List[Token],
        symbols: MutableMapping[str, int],
        emit: Callable[[str], None] = print,
    ) -> None:
        """Parse and evaluate the tokens produced by `Scanner(program).scan()`.

        For every assignment, `symbols` is updated and a line of the form "<id> = <value>"
        is passed to `emit`. The first syntax error or undefined symbol raises a
        ParserException, after which no further statements are evaluated.

        Args:
            tokens (List[Token]): A list of tokens, ending with an END token.
            symbols (MutableMapping[str, int]): The symbol table to read from and write to.
            emit (Callable[[str], None], optional): Receives each output line. Defaults to print.
        """
        if not tokens or tokens[-1].type != Type.END:
            raise ValueError("The list of tokens must end with an END token.")

        self.tokens = tokens
        self.index = 0
        self.symbols = symbols
        self.emit = emit

        try:
            self.program()
        except RecursionError:
            NestingTooDeepError(self.og_program, self.current_token().span)

    def current_token(self) -> Token:
        return self.tokens[self.index]

    def match(self, expected: Type | str) -> bool:
        return self.current_token().match(expected)

    def read_next(self) -> Token:
        token = self.current_token()
        # Never move past the END token
        if token.type != Type.END:
            self.index += 1
        return token

    def expect(self, expected: Type | str) -> Token:
        if not self.match(expected):
            UnexpectedTokenError(
                self.og_program,
                self.current_token().span,
                [expected],
                self.current_token(),
            )
        return self.read_next()

    def program(self) -> None:
        while not self.match(Type.END):
            self.assignment()

    def assignment(self) -> None:
        identifier = self.expect(Type.ID)
        self.expect("=")

        value = self.exp()

        self.expect(";")

        # Only store the value once the entire statement has been recognized
        self.symbols[identifier.text] = value
        self.emit(f"{identifier.text} = {value}")

    def exp(self) -> int:
        value = self.term()
        return self.exp_prime(value)

    def exp_prime(self, accumulated: int) -> int:
        while self.match("+") or self.match("-"):
            operator = self.read_next()
            value = self.term()
            match operator.text:
                case "+":
                    accumulated += value
                case "-":
                    accumulated -= value
        return accumulated

    def term(self) -> int:
        value = self.fact()
        return self.term_prime(value)

    def term_prime(self, accumulated: int) -> int:
        while self.match("*"):
            self.read_next()
            accumulated *= self.fact()
        return accumulated

    def fact(self) -> int:
        token = self.current_token()
        match token.type, token.text:
            case Type.LRB, _:
                self.read_next()
                value = self.exp()
                if not self.match(Type.RRB):
                    UnclosedBracketError(
                        self.og_program,
                        self.current_token().span,
                        token,
                        self.current_token(),
                    )
                self.read_next()
                return value

            # Note that the sign applies to the entire expression that follows it,
            # i.e. "-5 + 2" evaluates to -7
            case Type.OPERATOR, "+":
                self.read_next()
                return +self.exp()

            case Type.OPERATOR, "-":
                self.read_next()
                return -self.exp()

            case Type.INT, _:
                self.read_next()
                return int(token.text)

            case Type.ID, _:
                self.read_next()
                if token.text not in self.symbols:
                    UndefinedSymbolError(self.og_program, token.span, token)
                return self.symbols[token.text]

        UnexpectedTokenError(
            self.og_program,
            token.span,
            [Type.LRB, "+", "-", Type.INT, Type.ID],
            token,
        )


def run(
    tokens: List[Token],
    symbols: MutableMapping[str, int],
    emit: Callable[[str], None] = print,
    program: str = "",
) -> None:
    Parser(program).run(tokens, symbols, emit)
