"""Package-level exceptions.

Missing or absent collaborators are not modelled here: a missing required
dependency is a ``TypeError`` at construction time and an absent optional
one is simply ``None``.
"""


class DIFlavoursError(Exception):
    """Base class for errors raised by this package."""


class SchedulingError(DIFlavoursError, RuntimeError):
    """Raised when work cannot be handed to a task-execution context.

    Subclasses ``RuntimeError`` so callers already catching the error
    ``concurrent.futures`` raises after shutdown keep working.
    """
