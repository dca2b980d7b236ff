#! /usr/bin/env python3
#
# phat/deferred.py

"""Values produced on demand.

Any non-class callable is taken as a deferred value. `Deferred` wraps
a producer so that it is called at most once.
"""


class Deferred:
    """Value produced on demand.

    The producer is called at most once.
    """

    def __init__(self, produce):
        """Initialize.

        Args:
            produce (callable): Function, without arguments, returning
                the value.
        """
        self.produce = produce
        self._resolved = False
        self._value = None

    def __call__(self):
        if not self._resolved:
            self._value = self.produce()
            self._resolved = True
        return self._value

    def __repr__(self):
        return f"<Deferred produce={self.produce!r} resolved={self._resolved}>"


def is_deferred(value):
    """Return if value is to be resolved by calling it."""
    return isinstance(value, Deferred) or (callable(value) and not isinstance(value, type))


def resolve(value):
    """Resolve a deferred value. Other values are returned as is."""
    return value() if is_deferred(value) else value
