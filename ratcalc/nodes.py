"""
Expression tree.

A closed union of frozen dataclasses. Each node owns its children outright;
trees are built once by the parser and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ratcalc.rational import Rational


class UnaryOperator(Enum):
    NEGATE = '-'
    IDENTITY = '+'


class BinaryOperator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'


@dataclass(frozen=True)
class Number:
    value: Rational

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnaryOp:
    op: UnaryOperator
    operand: Node

    def __str__(self) -> str:
        return f"({self.op.value}{self.operand})"


@dataclass(frozen=True)
class BinaryOp:
    op: BinaryOperator
    left: Node
    right: Node

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


@dataclass(frozen=True)
class FuncCall:
    """
    Function call node.

    name:  function identifier (e.g. "sqrt", "scale")
    args:  argument expression nodes, in call order
    """
    name: str
    args: Tuple[Node, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(a) for a in self.args)})"


Node = Union[Number, UnaryOp, BinaryOp, FuncCall]
