class TrigulpError(Exception):
    """Base error."""

class ConfigError(TrigulpError, ValueError):
    """Raised when a run configuration is inconsistent."""

class OracleError(TrigulpError):
    """Raised for problems with a high-precision oracle."""

class OracleUnavailableError(OracleError):
    """Raised when an oracle cannot be started (missing program, library or banner)."""

class ReportFormatError(TrigulpError):
    """Raised when a saved report cannot be parsed."""
