"""Computes infix integer expressions given on the command line, read from a file, or typed into the shell. Also uses
error handling context manager. Called from the rpncalc console script.
"""

import argparse
import logging
import sys

from rpncalc.lang.error import ErrorHandler
from rpncalc.lang.session import Session
from rpncalc.lang.shell import Shell
from rpncalc.pure.numerical import POLICIES, get_policy


def get_parser():
    parser = argparse.ArgumentParser(prog="rpncalc", description="Shunting-yard/RPN integer calculator.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", help="file of expressions to compute (if empty, goes to command-line mode)", nargs="?")
    source.add_argument("-e", "--expr", help="expression to compute (can be repeated)", action="append", default=[])
    parser.add_argument("-t", "--type", help="integer type to compute in (default: int)", choices=list(POLICIES),
                        default="int")
    parser.add_argument("--rpn", help="also print the postfix form of each expression", action="store_true")
    parser.add_argument("-v", "--verbose", help="log parsing/evaluation steps", action="store_true")
    return parser


def main(argv=None):
    """Runs rpncalc. Called from rpncalc console script."""
    args = get_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")
    policy = get_policy(args.type)

    with ErrorHandler() as error_handler:
        if args.expr or args.file is not None:
            if args.file is not None:
                sess = Session(error_handler, args.file, policy, rpn=args.rpn)
            else:
                sess = Session(error_handler, Session.SH_FILE, policy, cmd_line=True, rpn=args.rpn)
                error_handler.fatal = True  # expressions given as arguments are fatal, like a file
                for idx, expr in enumerate(args.expr):
                    sess.add(expr, idx + 1)

            sess.run()

            while sess.results:
                print(sess.format(sess.pop()))

        else:
            Shell(Session(error_handler, Session.SH_FILE, policy, cmd_line=True, rpn=args.rpn)).cmdloop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
