"""Task tracker service: create tasks and look them up by id."""

__version__ = "0.1.0"
