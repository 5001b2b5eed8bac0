from .common import TokenError, trace
import re


class Token:
    def __init__(self, type, value):
        self.type = type
        self.value = value

    def __repr__(self):
        return f"Token('{self.type}', {self.value})"


def tok_number(s):
    token = ""
    while len(s) > 0 and re.match('[0-9]', s[0]):
        token += s[0]
        s = s[1:]

    if len(s) > 0 and s[0] == '.':
        token += s[0]
        s = s[1:]

    while len(s) > 0 and re.match('[0-9]', s[0]):
        token += s[0]
        s = s[1:]

    # an exponent needs digits, otherwise 'e' is left for the identifier rule
    m = re.match('[eE][-+]?[0-9]+', s)
    if m:
        token += m.group(0)
        s = s[m.end():]

    if token == '.':
        raise TokenError("unexpected token: .")

    return Token('number', float(token)), s


def tok_ident(s):
    t, s = s[0], s[1:]

    if not re.match('[_a-zA-Z]', t):
        raise TokenError(f"unexpected token: {t}")

    token = t
    while len(s) > 0 and re.match('[_a-zA-Z0-9]', s[0]):
        token += s[0]
        s = s[1:]

    return Token('identifier', token), s


@trace
def tokenize(s):
    # 'space': \s -> skip
    # \0: [-+*/^\(\),]
    # 'number':
    #   | [0-9]+\.?[0-9]*([eE][-+]?[0-9]+)?
    #   | \.[0-9]+([eE][-+]?[0-9]+)?
    # 'identifier': [_a-zA-Z][_a-zA-Z0-9]*

    tokens = []

    while len(s) > 0:
        if re.match(r'\s', s[0]):
            s = s[1:]
            continue

        if re.match(r'[-+*/^\(\),]', s[0]):
            t, s = s[0], s[1:]
            tokens.append(Token(t, None))
            continue

        if re.match('[0-9.]', s[0]):
            token, s = tok_number(s)
            tokens.append(token)
            continue

        if re.match('[_a-zA-Z]', s[0]):
            token, s = tok_ident(s)
            tokens.append(token)
            continue

        raise TokenError(f"unexpected token: {s[0]}")

    return tokens
