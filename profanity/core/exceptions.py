# profanity/core/exceptions.py

"""Custom exception hierarchy for the profanity filter.

This module defines the specific error types used throughout the application
to differentiate between configuration, validation, and runtime errors.
"""


class ProfanityFilterError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(ProfanityFilterError):
    """Raised when a word source or the lexicon manifest is invalid."""

    pass


class PipelineError(ProfanityFilterError):
    """Raised when a specific processing step in the pipeline fails."""

    pass


class ValidationError(ProfanityFilterError):
    """Raised when input validation fails (e.g., options of the wrong type)."""

    pass
