# profanity/engine/__init__.py

"""Engine package providing pattern caching, scanning, and redaction.

This package contains the components the filter pipeline composes for each
word source: the source registry, the compiled pattern cache, the match
scanner, and the Presidio-backed redactor.
"""
