"""Talkboard: a small shared schedule of talks and demos."""

__version__ = "0.1.0"
