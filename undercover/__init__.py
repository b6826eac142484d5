"""Undercover: a pass-and-play hidden-word party game for the text console."""

__version__ = "0.1.0"