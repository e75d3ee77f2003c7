import re
from typing import List

from assignlang.token import Token
from assignlang.type import Type
from assignlang.util import Span

from assignlang.error.scanner_error import (  # isort:skip
    LeadingZeroError,
    UnexpectedCharacterError,
)


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program

        # Alternatives are tried in order, so e.g. "007" hits LEADING_ZERO before INT
        self.pattern = re.compile(
            r"""
                (?P<LEADING_ZERO>0[0-9]+)|
                (?P<INT>0|[1-9][0-9]*)|
                (?P<ID>[A-Za-z_][A-Za-z0-9_]*)|
                (?P<OPERATOR>[=+\-*])|
                (?P<LRB>\()| # lrb = Left Round Bracket
                (?P<RRB>\))| # rrb = Right Round Bracket
                (?P<SEMICOLON>;)|
                (?P<SPACE>[\ \t\n\v\f\r])|
                (?P<ERROR>.)
            """,
            flags=re.X | re.S,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        The list always ends with a single END token. Scanning stops at the first
        illegal character or malformed integer literal, by raising a ScannerException.

        Returns:
            List[Token]: A list of Token instances
        """
        # Keep the line endings, so that unusual line separators are still scanned
        lines = self.og_program.splitlines(keepends=True)

        tokens = [
            token
            for line_no, line in enumerate(lines, start=1)
            for token in self.scan_line(line, line_no)
        ]
        tokens.append(Token(Type.END.value, Type.END, self.end_span(lines)))
        return tokens

    def scan_line(self, line: str, line_no: int) -> List[Token]:
        tokens = []
        for match in self.pattern.finditer(line):
            span = Span(line_no, match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "ERROR":
                    UnexpectedCharacterError(self.og_program, span)
                case "LEADING_ZERO":
                    LeadingZeroError(self.og_program, span)

            tokens.append(Token(match[0], Type[match.lastgroup], span))
        return tokens

    @staticmethod
    def end_span(lines: List[str]) -> Span:
        # Point just past the final character of the program
        if not lines:
            return Span(1, (0, 0))
        last = lines[-1].rstrip("\r\n")
        return Span(len(lines), (len(last), len(last)))


def tokenize(source: str) -> List[Token]:
    return Scanner(source).scan()
