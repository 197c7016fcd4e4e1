class QMLError(Exception):
    """Base class for all errors raised by the QML packages."""


class InvalidConfiguration(QMLError, ValueError):
    """
    A parameter handed to the core is outside its accepted domain.

    Raised before any work is done, so callers never see a partial result.
    """


class UnknownAlgorithm(InvalidConfiguration):
    """The algorithm id is not one of the four supported variants."""

    def __init__(self, algorithm_id):
        self.algorithm_id = algorithm_id
        super().__init__(f"Unknown algorithm: {algorithm_id!r}")
