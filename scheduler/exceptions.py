# scheduler/exceptions.py

class SchedulerError(Exception):
    """Base class for scheduling errors"""


class EmptyCollection(SchedulerError):
    """Raised by extract_top() / peek_top() when no task is pending."""


class InvalidPriority(SchedulerError):
    """Raised by insert() when a priority can't be ordered against the others."""
