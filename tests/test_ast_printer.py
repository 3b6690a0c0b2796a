from loxscan.ast_printer import AstPrinter
from loxscan.expr import Binary, Grouping, Literal, Unary
from loxscan.scanner import Scanner
from loxscan.token import Token
from loxscan.token_type import TokenType


def test_print_expression():
    expr = Binary(
        left=Unary(
            operator=Token(TokenType.MINUS, "-", None, 1),
            right=Literal(Token(TokenType.NUMBER, "123", 123.0, 1)),
        ),
        operator=Token(TokenType.STAR, "*", None, 1),
        right=Grouping(Literal(Token(TokenType.NUMBER, "45.67", 45.67, 1))),
    )

    assert AstPrinter().print(expr) == "(* (- 123) (group 45.67))"


def test_print_scanned_tokens():
    # !(1 == "one")
    bang, _, one, equal, string, _, _ = Scanner('!(1 == "one")').scan_tokens()
    expr = Unary(bang, Grouping(Binary(Literal(one), equal, Literal(string))))

    assert AstPrinter().print(expr) == '(! (group (== 1 "one")))'


def test_literals_print_their_lexeme():
    token = Token(TokenType.NUMBER, "1.50", 1.5, 1)
    assert AstPrinter().print(Literal(token)) == "1.50"
