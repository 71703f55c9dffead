"""timefield — personal task scheduler with a navigable working interval."""

__version__ = "0.2.0"
