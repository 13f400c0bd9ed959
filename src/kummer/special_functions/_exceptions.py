"""Warnings for special function evaluation."""


class SeriesConvergenceWarning(UserWarning):
    """Warning for series that fail to converge or lose precision."""

    pass
