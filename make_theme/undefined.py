"""The undefined sentinel.

Stores and resolvers return ``UNDEFINED`` when nothing is there. It is
distinct from ``None``, ``""``, ``0`` and ``False``, which are all real
stored values.
"""


class Undefined:
    """Singleton marker for an absent value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNDEFINED = Undefined()


def is_undefined(value) -> bool:
    """Check whether a value is the undefined sentinel."""
    return value is UNDEFINED
