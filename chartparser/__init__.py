"""Race chart distance, surface and track record parsing."""

__version__ = "0.1.0"
