"""Tokenizer and shunting-yard parser: converts an infix arithmetic expression into its postfix (RPN) token sequence.

Formally, the accepted infix grammar is

```
<expr>   ::= <number>                 ; maximal run of ASCII digits "0"-"9"
           | <expr> <op> <expr>       ; "+" "-" (precedence 2), "*" "/" (precedence 3), all left-associative
           | "(" <expr> ")"
```

No whitespace, unary minus or other characters are accepted. Tokenizing and parsing happen in the same left-to-right
pass: the parser only checks the parentheses, so that the evaluator is the one to reject misplaced operands/operators
(e.g. "1+" or "(1)(2)"), which show up as an unbalanced value stack.

Source: https://en.wikipedia.org/wiki/Shunting_yard_algorithm
"""

import logging

from rpncalc.lang.error import EmptyExpression, Overflow, UnmatchedParenthesis, UnrecognizedSymbol
from rpncalc.pure.numerical import INT
from rpncalc.pure.tokens import Associativity, LeftParen, Number, Operator, OperatorKind, to_rpn

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class _RightParen:
    """A ")" read at start. Never makes it into a token sequence: parse consumes it immediately."""

    def __init__(self, start):
        self.start = start


def tokenize(expression, policy=INT):
    """Yields the tokens of expression in infix order, with ")" yielded as a _RightParen. Number literals are
    accumulated in policy, so a literal too large for it raises Overflow.
    """
    if not expression:
        raise EmptyExpression()

    idx = 0
    while idx < len(expression):
        char = expression[idx]

        if char in DIGITS:
            start, value = idx, 0
            while idx < len(expression) and expression[idx] in DIGITS:
                try:
                    value = policy.accumulate(value, DIGITS.index(expression[idx]))
                except Overflow as error:
                    raise error.locate(start, idx + 1)
                idx += 1
            yield Number(value, start)
            continue

        kind = OperatorKind.from_symbol(char)
        if kind is not None:
            yield Operator(kind, idx)
        elif char == "(":
            yield LeftParen(idx)
        elif char == ")":
            yield _RightParen(idx)
        else:
            raise UnrecognizedSymbol(char, idx)
        idx += 1


def _closes(top, operator):
    """Whether top (an Operator on the operator stack) must be output before operator is pushed."""
    if isinstance(top, LeftParen):
        return False
    if top.precedence == operator.precedence:
        return operator.associativity is Associativity.LEFT
    return top.precedence > operator.precedence


def parse(expression, policy=INT):
    """Returns the postfix token sequence of the infix expression, as a list. Raises EmptyExpression,
    UnrecognizedSymbol, UnmatchedParenthesis, or Overflow (if a literal doesn't fit in policy).
    """
    output = []
    stack = []  # pending Operators and LeftParens

    for token in tokenize(expression, policy):
        if isinstance(token, Number):
            output.append(token)

        elif isinstance(token, Operator):
            while stack and _closes(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, _RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise UnmatchedParenthesis(")", token.start)
            stack.pop()

    while stack:
        token = stack.pop()
        if isinstance(token, LeftParen):
            raise UnmatchedParenthesis("(", token.start)
        output.append(token)

    logger.debug("parsed %r as '%s'", expression, to_rpn(output))
    return output
