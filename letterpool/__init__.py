"""letterpool — interactive word suggestions from a pool of letters."""

__version__ = "0.1.0"
