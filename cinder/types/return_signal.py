from cinder.types.value import Expr


class ReturnSignal(Exception):
    """Unwinds a function body to its call site, carrying the result."""

    def __init__(self, value: Expr):
        super().__init__()
        self.value = value
