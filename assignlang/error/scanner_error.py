from assignlang.error.error import InterpreterError, InterpreterException


class ScannerException(InterpreterException):
    pass


class ScannerError(InterpreterError):
    component = "Lexer"
    stage = ScannerException


class UnexpectedCharacterError(ScannerError):
    @property
    def message(self) -> str:
        return f"Unrecognized symbol {self.error_chars!r} on {self.span.location_str}."


class LeadingZeroError(ScannerError):
    @property
    def message(self) -> str:
        return (
            f"Invalid integer literal {self.error_chars!r} on {self.span.location_str}. "
            "Only the literal '0' may start with a zero."
        )
