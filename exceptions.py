"""
last_stander module: exceptions.py

Error families raised by the decision engine.
"""


class LastStanderError(Exception):
    """Base for all last_stander exceptions."""

    pass


class WiringError(LastStanderError):
    """Input width does not match a neuron's weight count.

    Always a static wiring bug; nothing in the engine catches it.
    """

    pass


class DistributionError(LastStanderError, ValueError):
    """Invalid probability, sampling weight or fitness value."""

    pass
