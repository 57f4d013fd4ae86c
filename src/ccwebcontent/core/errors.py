class CcWebContentError(Exception):
    """Base error for all user-facing cc-webcontent exceptions."""


class ConfigurationError(CcWebContentError):
    """Raised when configuration is invalid or incomplete."""


class ManifestError(CcWebContentError):
    """Raised when a resource manifest cannot be read or validated."""


class PackageRootError(CcWebContentError):
    """Raised when a logical path resolves outside the package root."""
