from .common import ParseError, trace
from .lexer import Token, tokenize
from .expr import Expr, CONSTANTS


GRAMMAR = """
expr: term, { '+' | '-', term }
term: factor, { '*' | '/', factor }
factor:
  | '-' | '+', factor
  | atom, [ '^', factor ]
atom:
  | 'identifier', '(', items, ')'
  | 'identifier'
  | '(', expr, ')'
  | 'number'
items: expr, { ',', expr }
"""


UNARY = {
    '-': 'neg',
    '+': 'pos',
}


def peek(tokens, offset=0):
    if len(tokens) > offset:
        return tokens[offset]

    return Token(None, None)


@trace
def parse_items(tokens):
    items = []

    while True:
        e, tokens = parse_expr(tokens)
        items.append(e)
        if peek(tokens).type == ',':
            tokens.pop(0)
        else:
            break

    return items, tokens


@trace
def parse_atom(tokens):
    next = peek(tokens)

    if next.type == 'identifier':
        tokens.pop(0)
        if peek(tokens).type == '(':
            tokens.pop(0)
            if peek(tokens).type == ')':
                raise ParseError(f"{next.value}: expected at least one argument")

            params, tokens = parse_items(tokens)
            if peek(tokens).type != ')':
                raise ParseError(f"expected ) but found {peek(tokens).type}")
            tokens.pop(0)

            return Expr('fcall', next.value, params), tokens

        if next.value in CONSTANTS:
            return Expr('const', next.value), tokens

        return Expr('var', next.value), tokens

    if next.type == '(':
        tokens.pop(0)
        expr, tokens = parse_expr(tokens)

        if peek(tokens).type == ')':
            tokens.pop(0)
        else:
            raise ParseError("expected closing )")

        return expr, tokens

    if next.type == 'number':
        next = tokens.pop(0)
        return Expr('literal', next.value), tokens

    if next.type is None:
        raise ParseError("unexpected end of input")

    raise ParseError(f"unexpected token: {next.type}")


@trace
def parse_factor(tokens):
    if peek(tokens).type in UNARY:
        op = UNARY[tokens.pop(0).type]
        left, tokens = parse_factor(tokens)
        return Expr(op, left), tokens

    left, tokens = parse_atom(tokens)

    if peek(tokens).type == '^':
        type = tokens.pop(0).type
        right, tokens = parse_factor(tokens)
        left = Expr(type, left, right)

    return left, tokens


@trace
def parse_term(tokens):
    left, tokens = parse_factor(tokens)

    while peek(tokens).type in ['*', '/']:
        type = tokens.pop(0).type
        right, tokens = parse_factor(tokens)
        left = Expr(type, left, right)

    return left, tokens


@trace
def parse_expr(tokens):
    left, tokens = parse_term(tokens)

    while peek(tokens).type in ['+', '-']:
        type = tokens.pop(0).type
        right, tokens = parse_term(tokens)
        left = Expr(type, left, right)

    return left, tokens


def parse(tokens):
    """Build an expression tree from a formula string or a token list.

    Raises TokenError or ParseError when the input is not a single
    well-formed arithmetic expression.
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)
    else:
        tokens = list(tokens)

    root, tokens = parse_expr(tokens)

    if tokens:
        raise ParseError(f"unexpected tokens: {tokens[0]}")

    return root
