"""Rules engine for a falling-pill matching puzzle."""

__version__ = "0.1.0"
