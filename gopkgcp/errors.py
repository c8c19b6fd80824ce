"""
Error kinds for gopkgcp.

File read/write failures are reported as the built-in OSError (IOError).
"""


class GopkgcpError(Exception):
    """Base class for all fatal extraction errors."""


class ConfigurationError(GopkgcpError):
    """Not running inside a recognizable Go module."""


class ExternalToolError(GopkgcpError):
    """goda or the go tool is missing or exited non-zero."""


class EmptyResultError(GopkgcpError):
    """The dependency lister returned no packages."""


class RewriteError(GopkgcpError):
    """Module name substitution failed part way through the output tree."""
