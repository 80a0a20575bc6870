from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ratcalc import rational
from ratcalc.errors import ArityError
from ratcalc.functions import DEFAULT_FUNCTIONS, FunctionTable
from ratcalc.nodes import BinaryOp, BinaryOperator, FuncCall, Node, Number, UnaryOp, UnaryOperator
from ratcalc.rational import Rational

logger = logging.getLogger(__name__)

BINARY_OPS: Dict[BinaryOperator, Callable[[Rational, Rational], Rational]] = {
    BinaryOperator.ADD: rational.add,
    BinaryOperator.SUB: rational.subtract,
    BinaryOperator.MUL: rational.multiply,
    BinaryOperator.DIV: rational.divide,
}

UNARY_OPS: Dict[UnaryOperator, Callable[[Rational], Rational]] = {
    UnaryOperator.IDENTITY: lambda x: x,
    UnaryOperator.NEGATE: rational.negate,
}


class Evaluator:
    """Evaluates expression trees to exact rationals using a function table."""

    def __init__(self, functions: Optional[FunctionTable] = None):
        self.functions = functions if functions is not None else DEFAULT_FUNCTIONS

    def eval(self, node: Node) -> Rational:
        """Evaluate given node post-order and return the result or raise EvalError."""
        if isinstance(node, Number):
            return node.value
        if isinstance(node, UnaryOp):
            return UNARY_OPS[node.op](self.eval(node.operand))
        if isinstance(node, BinaryOp):
            left = self.eval(node.left)
            right = self.eval(node.right)
            return BINARY_OPS[node.op](left, right)
        if isinstance(node, FuncCall):
            return self._call(node)
        raise TypeError(f"Unsupported expression node: {type(node).__name__}")

    def _call(self, node: FuncCall) -> Rational:
        builtin = self.functions.lookup(node.name)
        if len(node.args) != builtin.arity:
            raise ArityError(node.name, builtin.arity, len(node.args))
        args = [self.eval(a) for a in node.args]
        result = builtin(args)
        logger.debug(f"{node.name}({', '.join(str(a) for a in args)}) = {result}")
        return result
