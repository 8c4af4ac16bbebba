from lark import Transformer

from assemblerr.deps import sympy

FUNCTIONS = {
    'exp': sympy.exp,
    'log': sympy.log,
    'sqrt': sympy.sqrt,
    'abs': sympy.Abs,
    'sin': sympy.sin,
    'cos': sympy.cos,
    'tan': sympy.tan,
    'asin': sympy.asin,
    'acos': sympy.acos,
    'atan': sympy.atan,
}


class DeclarationTransformer(Transformer):
    """Build a (lhs, rhs) pair of sympy objects from a parse tree"""

    def start(self, children):
        return children[0]

    def named(self, children):
        name, rhs = children
        return sympy.Symbol(str(name)), rhs

    def anonymous(self, children):
        return None, children[-1]

    def add(self, children):
        a, b = children
        return a + b

    def sub(self, children):
        a, b = children
        return a - b

    def mul(self, children):
        a, b = children
        return a * b

    def div(self, children):
        a, b = children
        return a / b

    def neg(self, children):
        return -children[0]

    def pow(self, children):
        a, b = children
        return a**b

    def number(self, children):
        s = str(children[0])
        try:
            return sympy.Integer(int(s))
        except ValueError:
            return sympy.Float(s)

    def symbol(self, children):
        return sympy.Symbol(str(children[0]))

    def indexed(self, children):
        name, index = children
        return sympy.Indexed(sympy.IndexedBase(str(name)), index)

    def name_index(self, children):
        s = str(children[0])
        if s[0] in '"\'':
            s = s[1:-1]
        return sympy.Symbol(s)

    def position_index(self, children):
        s = str(children[0])
        try:
            return sympy.Integer(int(s))
        except ValueError:
            raise ValueError(f'Index must be an integer or a name: got {s}')

    def call(self, children):
        name, *args = children
        name = str(name)
        fn = FUNCTIONS.get(name.lower())
        if fn is None:
            fn = sympy.Function(name)
        return fn(*args)
