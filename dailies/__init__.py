# Rev 0.1.0
"""Job Dailies: a single-user daily work-log tracker."""

__version__ = "0.1.0"
