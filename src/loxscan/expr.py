#!/usr/bin/env python3
from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from loxscan.token import Token

# Return type of the Visitor interface, covariant to allow for Visitor[object].
R = TypeVar("R", covariant=True)


# eq=False keeps identity based equality and hashing for nodes.
@dataclass(eq=False, frozen=True)
class Expr(metaclass=ABCMeta):
    """Base class for a Lox expression.

    An expression is a tree of Tokens which evaluates to a value. Expressions
    are implemented using the visitor pattern, all expressions implement a
    single method, accept, which routes the expression to the correct visitor
    method on the invoking instance.

    Every node refers to the Tokens produced by the Scanner, never to raw text.
    """

    @abstractmethod
    def accept(self, visitor: Visitor[R]) -> R: ...


@dataclass(eq=False, frozen=True)
class Binary(Expr):
    """Binary expression.

    For example, 2 * 3:
    Binary(
        left=Literal(Token(TokenType.NUMBER, "2", 2.0, 1)),
        operator=Token(TokenType.STAR, "*", None, 1),
        right=Literal(Token(TokenType.NUMBER, "3", 3.0, 1)),
    )

    Args:
        left: Expr. Expression for the left operand.
        operator: Token. Token representing the binary operation.
        right: Expr. Expression for the right operand.
    """

    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(eq=False, frozen=True)
class Grouping(Expr):
    """Grouping expression, a parenthesized expression such as (2 + 2).

    Args:
        expression: Expr. The expression within the parentheses.
    """

    expression: Expr

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(eq=False, frozen=True)
class Literal(Expr):
    """Literal expression.

    Args:
        value: Token. The NUMBER, STRING, TRUE, FALSE or NIL Token of the literal.
    """

    value: Token

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(eq=False, frozen=True)
class Unary(Expr):
    """Unary expression, either -operand or !operand.

    Args:
        operator: Token. MINUS or BANG Token.
        right: Expr. Expression for the operand.
    """

    operator: Token
    right: Expr

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_unary_expr(self)


class Visitor(Generic[R], metaclass=ABCMeta):
    """Lox expression visitor.

    An implementing subclass must override the visit methods for all Expr
    types, each returning R.
    """

    @abstractmethod
    def visit_binary_expr(self, expr: Binary) -> R: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: Grouping) -> R: ...

    @abstractmethod
    def visit_literal_expr(self, expr: Literal) -> R: ...

    @abstractmethod
    def visit_unary_expr(self, expr: Unary) -> R: ...
