"""Tokens of infix arithmetic expressions and of their postfix (RPN) form.

The token set is closed:

```
<token> ::= <number>      ; maximal run of ASCII digits, arity 0
          | <operator>    ; "+" | "-" | "*" | "/", arity 2, all left-associative
          | "("           ; only ever lives on the parser's operator stack
```

")" is not a token: the parser consumes it on the spot (see pure/lexical.py).

Every token remembers where it started in the source expression. That position is only used for error messages and
does not take part in equality.
"""

from dataclasses import dataclass, field
from enum import Enum


class Associativity(Enum):
    LEFT = "left"


class OperatorKind(Enum):
    """Binary operators, with their symbol and precedence. Higher precedence binds tighter."""
    ADD = ("+", 2)
    SUB = ("-", 2)
    MUL = ("*", 3)
    DIV = ("/", 3)

    def __init__(self, symbol, precedence):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = Associativity.LEFT

    @classmethod
    def from_symbol(cls, symbol):
        """Returns the OperatorKind for symbol, or None if symbol isn't an operator."""
        for kind in cls:
            if kind.symbol == symbol:
                return kind
        return None


@dataclass(frozen=True)
class Number:
    value: int
    start: int = field(default=0, compare=False)

    arity = 0

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind
    start: int = field(default=0, compare=False)

    arity = 2

    @property
    def precedence(self):
        return self.kind.precedence

    @property
    def associativity(self):
        return self.kind.associativity

    def __str__(self):
        return self.kind.symbol


@dataclass(frozen=True)
class LeftParen:
    """Structural marker: pushed onto the operator stack by "(" and discarded by the matching ")"."""
    start: int = field(default=0, compare=False)

    def __str__(self):
        return "("


def to_rpn(tokens):
    """Returns tokens as space-separated postfix text, e.g. '6 8 8 + 2 / 1 - *'."""
    return " ".join(str(token) for token in tokens)
