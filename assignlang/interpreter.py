from typing import Callable, MutableMapping, Optional

from assignlang.parser.parser import Parser
from assignlang.scanner.scanner import Scanner


def execute(
    program: str,
    symbols: Optional[MutableMapping[str, int]] = None,
    emit: Callable[[str], None] = print,
) -> MutableMapping[str, int]:
    """Scan, parse and evaluate `program`, returning the resulting symbol table.

    Scanning completes before any statement is evaluated, so a lexical error anywhere
    in the program prevents all output.
    """
    if symbols is None:
        symbols = {}

    # Perform scanning on the input program
    scanner = Scanner(program)
    tokens = scanner.scan()

    # Parse and evaluate the scanned tokens
    parser = Parser(program)
    parser.run(tokens, symbols, emit)
    return symbols
