"""Custom exceptions."""


class PolicyEvidenceError(Exception):
    """Base class for errors raised outside the verification engine."""


class ConfigError(PolicyEvidenceError):
    """Raised when configuration loading fails."""


class SummaryFormatError(PolicyEvidenceError):
    """Raised when a summary document cannot be read or parsed."""
