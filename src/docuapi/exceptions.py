"""Exception hierarchy for docuapi.

All exceptions inherit from :class:`DocuapiError`, which carries an
``exit_code`` attribute. The CLI catches ``DocuapiError``, prints the
message to stderr and exits with that code.

Subclass hierarchy::

    DocuapiError            (exit 1)
    +-- InputError          (exit 1)
    |   +-- SpecNotFoundError
    +-- DecodeError         (exit 1)
    +-- ConfigError         (exit 1)
    +-- OutputError         (exit 1)
"""

EXIT_FAILURE = 1


class DocuapiError(Exception):
    """Base exception for all docuapi errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InputError(DocuapiError):
    """Raised when an input document cannot be read."""

    hint: str | None = None


class SpecNotFoundError(InputError):
    """Raised when an input document does not exist."""

    hint = "Check the path, or run from the directory that contains the spec."


class DecodeError(DocuapiError):
    """Raised when a document is not valid YAML/JSON, or not a mapping."""


class ConfigError(DocuapiError):
    """Raised for an unreadable or malformed configuration file."""


class OutputError(DocuapiError):
    """Raised when the generated site cannot be written to disk."""
