# moodtracker/exceptions.py
"""
Exceptions shared across the whole project.

- ConfigError      : environment / settings problems (.env, strategy names)
- CatalogLoadError : theme catalog or stopword YAML could not be loaded
- EntryDataError   : journal entry payload failed validation
- AnalysisError    : thematic analysis failed as a whole
"""


class ConfigError(RuntimeError):
    """Environment settings (.env, analysis options) are invalid."""
    pass


class CatalogLoadError(IOError):
    """Theme catalog / stopword file could not be read or has a bad shape."""
    pass


class EntryDataError(ValueError):
    """Journal entry data (function level, timestamp, time range...) is invalid."""
    pass


class AnalysisError(RuntimeError):
    """Thematic analysis failed as a whole."""
    pass
