from dataclasses import dataclass
from typing import ClassVar

from assignlang.error.communicator import Communicator
from assignlang.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class InterpreterException(Exception):
    def __init__(self, error: "InterpreterError") -> None:
        super().__init__(str(error))
        self.error = error


@dataclass
class InterpreterError:
    program: str
    span: Span

    component: ClassVar[str] = "Interpreter"
    stage: ClassVar[type] = InterpreterException

    # Errors are unrecoverable: creating one immediately halts the run
    def __post_init__(self) -> None:
        Communicator.communicate(self)

    @property
    def message(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return Communicator.create_header(self.component, self.message)

    def context(self, color: bool = True) -> str:
        """Give the lines surrounding the error, with the offending characters highlighted.

        Args:
            color (bool, optional): Whether to highlight using ANSI colors. Defaults to True.

        Returns:
            str: The excerpt of the program, prefixed by line numbers.
        """
        return Communicator.create_message(self.program, self.span, color=color)

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = self.program.splitlines()
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        return lines[self.span.start_ln - 1][self.span.start_col : self.span.end_col]
