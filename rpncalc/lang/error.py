"""Error handling for rpncalc. Only CalcErrors should be encountered while computing an expression: if another type
of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class CalcError(Exception):
    """Templates an error message so that it can be reported against the offending expression. start and end delimit
    the offending characters of the expression (end defaults to start + 1).
    """
    template = "invalid expression"

    def __init__(self, msg=None, snippets=None, start=0, end=-1, diagnosis=True):
        if msg is None:
            msg = self.template
        if snippets is None:
            snippets = []
        if isinstance(snippets, str):
            snippets = [snippets]

        self.msg = msg.format(*(colored(snippet, attrs=["bold"]) for snippet in snippets))  # color snippets
        self.start = start
        self.end = end if end != -1 else start + 1
        self.diagnosis = diagnosis

        super().__init__(msg.format(*snippets))

    def locate(self, start, end=-1):
        """Points this error at expression[start:end]. Used when the raiser doesn't know where it is in the
        expression, e.g. arithmetic errors raised by a numeric policy.
        """
        self.start = start
        self.end = end if end != -1 else start + 1
        self.diagnosis = True
        return self


class EmptyExpression(CalcError):
    template = "expression cannot be empty"

    def __init__(self):
        super().__init__(diagnosis=False)


class UnrecognizedSymbol(CalcError):
    template = "unrecognized symbol '{}'"

    def __init__(self, symbol, start):
        super().__init__(snippets=symbol, start=start)
        self.symbol = symbol


class UnmatchedParenthesis(CalcError):
    template = "'{}' has no matching '{}'"

    def __init__(self, paren, start):
        super().__init__(snippets=[paren, "(" if paren == ")" else ")"], start=start)
        self.paren = paren


class MalformedExpression(CalcError):
    template = "malformed expression"


class DivisionByZero(CalcError):
    template = "division by zero"


class Underflow(CalcError):
    template = "'{}' underflows {}"

    def __init__(self, value, type_name):
        super().__init__(snippets=[str(value), type_name], diagnosis=False)


class Overflow(CalcError):
    template = "'{}' overflows {}"

    def __init__(self, value, type_name):
        super().__init__(snippets=[str(value), type_name], diagnosis=False)


class ErrorHandler:
    """Context manager that reports rpncalc errors instead of letting Python tracebacks through."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num=None):
        """Registers line in traceback given path. Should be called prior to computing line."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after line was computed successfully."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(expr, error):
        """Returns offending part of expr highlighted and bolded, with a caret line underneath."""
        start = min(error.start, len(expr))
        end = max(min(error.end, len(expr)), start + 1)

        diagnosis = "  " + expr[:start]
        diagnosis += colored(expr[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += expr[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error, internal=False):
        """Reports error against self.traceback, a dict of path: (line, line_num) representing the origination of
        error. Exits if self.fatal.
        """
        error_msg = ""
        expr = None
        for path, (line, line_num) in self.traceback.items():
            if line is not None:
                if line_num is not None:
                    error_msg += f"  File '{path}', line {line_num}:\n"
                    error_msg += f"    {line}\n"
                expr = line

        if internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not internal and expr and error.diagnosis:
            print(ErrorHandler.diagnose(expr, error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # error occurred, reset traceback

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(CalcError("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is not None and issubclass(exc_type, CalcError):
            self.throw(exc_val)
        elif exc_type is not None:
            unknown = CalcError("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", diagnosis=False)
            self.throw(unknown, internal=True)
            do_exit = True

        return not do_exit
