from .frozen import FrozenDict


class UnboundVariable(KeyError):
    """
    Raised when a formula mentions a variable the assignment has no value for
    """

    def __init__(self, name):
        super().__init__(name)
        self.name = name
        # Set by the truth table driver when the failure belongs to a row
        self.row = None

    def __str__(self):
        if self.row is None:
            return f"Unbound variable '{self.name}'"
        return f"Unbound variable '{self.name}' in row {self.row}"


class Assignment(FrozenDict):
    """
    Maps variable identifiers to truth values. Immutable once created
    """

    def get_identifier(self, name):
        return lookup(self, name)

    def __repr__(self):
        return f"Assignment({dict.__repr__(self)})"


def lookup(assignment, name):
    try:
        return assignment[name]
    except KeyError:
        raise UnboundVariable(name) from None
