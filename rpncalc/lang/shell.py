"""Handles interactive/command-line mode for rpncalc. Uses cmd as backend."""

import cmd

from rpncalc.lang.error import CalcError
from rpncalc.pure.lexical import parse
from rpncalc.pure.numerical import POLICIES, get_policy
from rpncalc.pure.tokens import to_rpn


class Shell(cmd.Cmd):
    """Arithmetic expression shell."""
    intro = "Integer arithmetic calculator :: shunting-yard/RPN backend\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self.line_num = 0

    def default(self, line):
        """Computes arbitrary expression."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line = self.sess.preprocess_line(line)
            if not line:
                return

            self.sess.add(line, self.line_num)
            self.sess.run()

            if self.sess.results:
                print(self.sess.format(self.sess.pop()))

    def do_type(self, arg):
        """type [NAME]: shows or switches the integer type expressions are computed in."""
        if not arg:
            print(f"{self.sess.policy} (available: {', '.join(POLICIES)})")
            return

        with self.sess.error_handler:
            try:
                self.sess.policy = get_policy(arg.strip())
            except KeyError:
                raise CalcError("unknown integer type '{}'", arg.strip(), diagnosis=False)

    def do_rpn(self, arg):
        """rpn EXPR: shows the postfix form of EXPR without computing it."""
        with self.sess.error_handler:
            self.line_num += 1
            expr = self.sess.preprocess_line(arg)
            self.sess.error_handler.register_line(self.sess.path, expr, self.line_num)
            print(to_rpn(parse(expr, self.sess.policy)))
            self.sess.error_handler.remove_line(self.sess.path)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to rpncalc!\n\n"
              "Type an infix expression made of non-negative integers, '+', '-', '*', '/' and \n"
              "parentheses, without spaces, e.g. '6*((8+8)/2-1)'. It is converted to reverse \n"
              "Polish notation and computed in the current integer type.\n\n"
              "Commands:\n"
              "  type [NAME]  show or switch the integer type (int, uint32, int8, ...)\n"
              "  rpn EXPR     show the postfix form of EXPR\n"
              "  exit         leave the shell")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits calculator."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits calculator."""
        return True
