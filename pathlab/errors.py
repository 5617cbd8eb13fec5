"""
Exception types raised by the graph model and the algorithm dispatcher.

Unreachable targets and negative cycles are reported through results,
never raised.
"""


class PathlabError(ValueError):
    """Base class for invalid input to the engine."""


class GraphError(PathlabError):
    """A graph violates a structural invariant (dangling edge, self-loop, ...)."""


class InvalidInvocationError(PathlabError):
    """An algorithm was requested with arguments it cannot run on."""


class UnknownAlgorithmError(InvalidInvocationError):
    """No algorithm is registered under the requested name."""
