from .common import EvalError, trace
import subprocess
import numpy as np


def _log(x, base=None):
    if base is None:
        return np.log(x)
    return np.log(x) / np.log(base)


FUNCTIONS = {
    'log': _log,
    'sin': np.sin,
    'sen': np.sin,
    'cos': np.cos,
    'tan': np.tan,
    'arcsin': np.arcsin,
    'arcsen': np.arcsin,
    'arccos': np.arccos,
    'arctan': np.arctan,
    'mod': np.abs,
    'abs': np.abs,
}

CONSTANTS = {
    'e': np.e,
}

BINOPS = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.divide,
    '^': np.power,
}


UNOPS = {
    'neg': '-',
    'pos': '+',
}


class Expr:
    """Node of an expression tree.

    `type` selects the node kind, `left` and `right` hold its payload:

        'literal'            value
        'var'                identifier name
        'const'              constant name
        'neg', 'pos'         operand
        '+' '-' '*' '/' '^'  left operand, right operand
        'fcall'              function name, tuple of arguments

    Nodes cannot be modified once built, so a tree can be shared freely
    between evaluations.
    """

    ID = 0

    __slots__ = ('type', 'left', 'right', 'id')

    def __init__(self, type, left, right=None):
        if type == 'fcall':
            right = tuple(right)

        object.__setattr__(self, 'type', type)
        object.__setattr__(self, 'left', left)
        object.__setattr__(self, 'right', right)
        object.__setattr__(self, 'id', Expr.ID)
        Expr.ID += 1

    def __setattr__(self, name, value):
        raise AttributeError(f"Expr is immutable: cannot set '{name}'")

    def eval(self, x):
        with np.errstate(all='ignore'):
            return float(self._eval(np.float64(x)))

    @trace
    def _eval(self, x):
        if self.type == 'literal':
            return np.float64(self.left)

        elif self.type == 'var':
            return x

        elif self.type == 'const':
            # only 'e' is ever built by the parser, anything else reads as x
            return CONSTANTS.get(self.left, x)

        elif self.type == 'neg':
            return np.negative(self.left._eval(x))

        elif self.type == 'pos':
            return self.left._eval(x)

        elif self.type in BINOPS:
            left = self.left._eval(x)
            right = self.right._eval(x)
            return BINOPS[self.type](left, right)

        elif self.type == 'fcall':
            fname = self.left
            args = self.right

            if not args:
                raise EvalError(f"{fname}: expected at least one argument")

            if fname not in FUNCTIONS:
                return x

            if fname == 'log' and len(args) == 2:
                return _log(args[0]._eval(x), args[1]._eval(x))

            return FUNCTIONS[fname](args[0]._eval(x))

        raise EvalError(f"unknown expression type: {self.type}")

    def children(self):
        if self.type in UNOPS:
            return [self.left]
        if self.type in BINOPS:
            return [self.left, self.right]
        if self.type == 'fcall':
            return list(self.right)
        return []

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return (self.type, self.left, self.right) == (other.type, other.left, other.right)

    def __hash__(self):
        return hash((self.type, self.left, self.right))

    def __repr__(self):
        return f"Expr({self.type}, {self.left}, {self.right})"


def evaluate(expr, x):
    return expr.eval(x)


def draw_tree(root, fname="tree"):
    ids = set()

    with open(f"{fname}.dot", 'w') as f:
        f.write("graph {\n")

        queue = [root]
        while queue:
            n = queue.pop()
            if n.id in ids:
                continue
            ids.add(n.id)

            if n.type == 'literal':
                f.write(f'v{n.id}[label="{n.left:g}"];\n')

            elif n.type in ('var', 'const'):
                f.write(f'v{n.id}[label="{n.left}"];\n')

            elif n.type == 'fcall':
                f.write(f'v{n.id}[label="{n.left}()"];\n')

            elif n.type in UNOPS:
                f.write(f'v{n.id}[label="{UNOPS[n.type]}"];\n')

            else:
                f.write(f'v{n.id}[label="{n.type}"];\n')

            for m in n.children():
                f.write(f'v{n.id} -- v{m.id};\n')
                queue.append(m)

        f.write("}\n")

    subprocess.run(["dot", "-Tsvg", f"-o{fname}.svg", f"{fname}.dot"])
