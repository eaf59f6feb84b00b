# profanity/core/__init__.py

"""Core domain models and utilities used across the profanity filter.

This package provides domain types, exceptions, and the built-in lexicon
loader shared by the rest of the application.
"""
