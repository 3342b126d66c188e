"""Session control for rpncalc. Computes expressions line by line, either read from a file or typed into the shell.

A file holds one infix expression per line. Everything after ";;" is a comment, trailing whitespace is ignored, and
blank lines are skipped. Whitespace inside an expression is still an error.
"""

import logging

from rpncalc.lang.error import CalcError
from rpncalc.pure.evaluation import evaluate
from rpncalc.pure.lexical import parse
from rpncalc.pure.numerical import INT
from rpncalc.pure.tokens import to_rpn

logger = logging.getLogger(__name__)


class Session:
    """Governs a rpncalc session: the integer type expressions are computed in, and their results."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";;"

    def __init__(self, error_handler, path, policy=INT, cmd_line=False, rpn=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.policy = policy      # integer type to compute in
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.rpn = rpn            # whether or not to keep the postfix form of each result

        self.to_exec = {}  # dict of line num: (expr, postfix tokens) to evaluate
        self.results = []  # computed values (or (rpn, value) pairs if self.rpn), oldest first

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    lines = list(file)
            except OSError:
                raise CalcError("'{}' could not be opened", path, diagnosis=False)

            for line_num, line in enumerate(lines):
                line = Session.preprocess_line(line)
                if line:
                    self.add(line, line_num + 1)

        elif not cmd_line:
            raise CalcError("'<in>' is a reserved filename", diagnosis=False)

    @staticmethod
    def preprocess_line(line):
        """Removes comments and trailing whitespace from line. Returns "" if nothing is left to compute."""
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]
        return line.rstrip()

    def add(self, expr, line_num=None):
        """Parses expr and queues it. Evaluation is delayed until run is called."""
        if line_num is None:
            line_num = max(self.to_exec, default=0) + 1

        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised
        self.to_exec[line_num] = (expr, parse(expr, self.policy))
        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Evaluates this session's queued expressions in line order. Will raise any errors that are encountered."""
        for line_num, (expr, tokens) in sorted(self.to_exec.items()):
            self.error_handler.register_line(self.path, expr, line_num)

            try:
                value = evaluate(tokens, self.policy)
            finally:
                del self.to_exec[line_num]

            logger.debug("%s:%s: %s = %s", self.path, line_num, expr, value)
            self.results.append((to_rpn(tokens), value) if self.rpn else value)

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Returns the oldest result that hasn't been popped yet."""
        return self.results.pop(0)

    def format(self, result):
        """Returns result (as returned by pop) as printable text: 'RPN = VALUE' if self.rpn, else 'VALUE'."""
        if self.rpn:
            rpn, value = result
            return f"{rpn} = {value}"
        return str(result)
