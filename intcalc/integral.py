from .common import trace
from .parser import parse


class DiscreteIntegral:
    """Definite integral of `function` over [initial_x, end_x], approximated
    with the composite trapezoidal rule on `intervals` equal sub-intervals.

    `samples` collects every (x, f(x)) pair evaluated by `calculate`, in
    order of increasing x, and `result` holds the integral once it has been
    calculated. An instance is meant to be calculated once: a second call
    appends a second set of samples.
    """

    def __init__(self, function, initial_x, end_x, intervals=1000):
        self.function = function
        self.initial_x = initial_x
        self.end_x = end_x
        self.intervals = intervals
        self.samples = []
        self.result = None
        self._expr = None

    @property
    def expr(self):
        if self._expr is None:
            self._expr = parse(self.function)
        return self._expr

    @property
    def xs(self):
        return [x for x, _ in self.samples]

    @property
    def ys(self):
        return [y for _, y in self.samples]

    def f(self, x):
        return self.expr.eval(x)

    def add(self, x, y):
        self.samples.append((x, y))

    @trace
    def calculate(self):
        a = self.initial_x
        b = self.end_x
        h = (b - a) / self.intervals

        start = self.f(a)
        end = self.f(b)
        total = 0.0

        self.add(a, start)

        for i in range(1, self.intervals):
            x = a + i * h
            y = self.f(x)
            total += y
            self.add(x, y)

        self.add(b, end)

        self.result = h * (start / 2 + total + end / 2)

        return self.result

    def __repr__(self):
        return (f"DiscreteIntegral({self.function!r}, {self.initial_x}, "
                f"{self.end_x}, intervals={self.intervals})")


def calculate(di):
    return di.calculate()


def integrate(function, initial_x, end_x, intervals=1000):
    di = DiscreteIntegral(function, initial_x, end_x, intervals)
    di.calculate()
    return di
