"""Custom exceptions for license-check."""


class LicenseCheckError(Exception):
    """Base exception for all license-check errors."""

    pass


class ConfigurationError(LicenseCheckError):
    """Exception raised when configuration is invalid."""

    pass


class ScanError(LicenseCheckError):
    """Exception raised when the artifact set cannot be obtained."""

    pass


class DescriptorTableError(LicenseCheckError):
    """Exception raised when the license descriptor table cannot be loaded."""

    pass


class DocumentNotFoundError(LicenseCheckError):
    """Exception raised when no POM can be located for an artifact."""

    pass


class MalformedDocumentError(LicenseCheckError):
    """Exception raised when a POM section is opened but never closed."""

    pass


class ArtifactResolutionError(LicenseCheckError):
    """Exception raised when a coordinate cannot be resolved to a file."""

    pass
