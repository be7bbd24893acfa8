class SweeperError(Exception):
    """Base class for every error raised by the sweeper simulation."""


class ConfigurationError(SweeperError, ValueError):
    """Invalid configuration, or a weight vector that does not fit the network."""


class MalformedOutputError(SweeperError, RuntimeError):
    """A sweeper's network produced fewer outputs than the configured output count.

    The topology is wrong and the failure would repeat on every tick, so the
    run is stopped instead of retried.
    """

    def __init__(self, sweeper_index: int, expected: int):
        self.sweeper_index = sweeper_index
        self.expected = expected
        super().__init__(
            f"sweeper {sweeper_index}: network returned fewer than {expected} outputs "
            f"(wrong amount of network inputs?)")


class DegenerateSelectionError(SweeperError):
    """Roulette-wheel selection on a population whose total fitness is zero."""
