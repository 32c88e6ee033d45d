"""Export local browser history (Chrome, Firefox, Safari) to a CSV report."""

__version__ = "0.1.0"
