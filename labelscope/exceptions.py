"""
Exception and warning types raised by labelscope.

Classes:
    LabelscopeError: Base class for all labelscope errors
    InvalidInput: Malformed or missing construction/evaluation arguments
    ShapeMismatch: Ground truth and prediction matrices differ in shape
    RequiresScores: A ranking metric was requested on purely binary predictions
    DegenerateLabel: Warning for a label that is constant across all instances
"""


class LabelscopeError(Exception):
    """Base class for errors raised by labelscope."""


class InvalidInput(LabelscopeError, ValueError):
    """Raised when construction or evaluation arguments are malformed."""


class ShapeMismatch(LabelscopeError, ValueError):
    """Raised when ground truth and predictions have different shapes."""


class RequiresScores(LabelscopeError, ValueError):
    """Raised when a ranking metric receives purely binary predictions."""


class DegenerateLabel(UserWarning):
    """
    Warning issued when a label has the same value in every instance.

    Construction proceeds; the label is flagged as degenerate and its
    infinite imbalance ratio is left out of the aggregate means.
    """
