from assignlang.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates the one-line diagnostic, e.g. "Lexer error: Unrecognized symbol ..."
    @staticmethod
    def create_header(component: str, message: str) -> str:
        return f"{component} error: {message}"

    # Creates an excerpt of the program with the span highlighted
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        header: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color: bool = True,
    ) -> str:
        start, end = (Colors.RED, Colors.ENDC) if color else ("", "")
        lines = program.splitlines()
        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
        ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. a = 12;
            # -> *9. b = a + ;
            #    10. c = b;
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if span.start_ln <= i <= span.end_ln:
                # The END token may point just past the final character
                highlighted = line[span.start_col : span.end_col] or (" " if color else "")
                final_line = f"-> {padding}{i}. {line[:span.start_col]}"
                final_line += f"{start}{highlighted}{end}"
                final_line += line[span.end_col :]
            else:
                final_line = f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = "\n".join(final_error_lines)
        if header:
            message = header + "\n" + message
        return message

    # Raise the exception belonging to the stage of the given error
    @staticmethod
    def communicate(error) -> None:
        raise error.stage(error)
