"""Stack-based evaluation of postfix (RPN) token sequences."""

import logging

from rpncalc.lang.error import CalcError, MalformedExpression
from rpncalc.pure.lexical import parse
from rpncalc.pure.numerical import INT
from rpncalc.pure.tokens import LeftParen, Number, Operator

logger = logging.getLogger(__name__)


def evaluate(tokens, policy=INT):
    """Reduces the postfix sequence tokens to a single value of the integer type policy stands for.

    Operands are popped right first, then left, so "8 2 /" is 8 / 2. Raises MalformedExpression if an operator finds
    fewer than two values or if anything but exactly one value is left at the end; arithmetic errors raised by policy
    (DivisionByZero, Underflow, Overflow) are pointed at the operator that caused them.

    A LeftParen in tokens means tokens didn't come out of parse, so it's treated as an internal error rather than a
    malformed expression.
    """
    stack = []
    for token in tokens:
        if isinstance(token, Number):
            try:
                stack.append(policy.check(token.value))
            except CalcError as error:
                raise error.locate(token.start, token.start + len(str(token.value)))

        elif isinstance(token, Operator):
            if len(stack) < token.arity:
                raise MalformedExpression("'{}' is missing an operand", str(token), start=token.start)

            right = stack.pop()
            left = stack.pop()
            try:
                stack.append(policy.apply(token.kind, left, right))
            except CalcError as error:
                raise error.locate(token.start)

        elif isinstance(token, LeftParen):
            raise AssertionError(f"'(' at {token.start} left in postfix sequence")

        else:
            raise AssertionError(f"{token!r} is not a token")

    if len(stack) != 1:
        # either nothing was computed or operands were left over, e.g. "(1)(2)"
        raise MalformedExpression(f"expected one value, {len(stack)} left after evaluation", diagnosis=False)

    logger.debug("evaluated to %s in %s", stack[0], policy)
    return stack[0]


def compute(expression, policy=INT):
    """Parses then evaluates the infix expression in policy."""
    return evaluate(parse(expression, policy), policy)
