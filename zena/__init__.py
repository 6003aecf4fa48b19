"""Command-line assistant that asks an AI provider and prints colour-coded answers."""

__version__ = "0.1.0"

__all__ = ["__version__"]