#!/usr/bin/env python3
from loxscan.expr import Binary, Expr, Grouping, Literal, Unary, Visitor


class AstPrinter(Visitor[str]):
    """Printer generating a Lisp style representation of a Lox expression tree.

    Only the lexemes of the Tokens in the tree are used, so literals are printed
    exactly as they were written in the source.

    For example, -123 * (45.67):
    AstPrinter().print(expr)
    '(* (- 123) (group 45.67))'
    """

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self.parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        return expr.value.lexeme

    def visit_unary_expr(self, expr: Unary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def parenthesize(self, name: str, *exprs: Expr) -> str:
        builder = ""

        builder += f"({name}"
        for expr in exprs:
            builder += f" {self.print(expr)}"
        builder += ")"

        return builder
