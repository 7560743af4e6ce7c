"""
wordrng.core.exceptions

All custom exceptions for wordrng.

Design: Fail fast and loud with informative errors.
"""


class WordRngError(Exception):
    """Base exception for all wordrng errors."""
    pass


class InvalidArgumentError(WordRngError):
    """Argument failed a boundary check.

    Raised before any word is drawn, so the generator state is untouched.
    """
    pass


class InsufficientSeedMaterialError(WordRngError):
    """Explicit seed has fewer values than the engine's state needs."""
    pass


class EntropySourceError(WordRngError):
    """The operating system entropy source could not be read.

    Raised by reseed(). There is no fallback to a weaker seed.
    """
    pass


class RejectionLimitError(WordRngError):
    """A rejection loop exceeded its configured maximum iteration count.

    Only raised when a max_rejections cap has been set explicitly.
    """
    pass


class ConfigError(WordRngError):
    """Configuration invalid or missing.

    Raised when config files are malformed or required fields are absent.
    """
    pass


class RegistryError(WordRngError):
    """Engine registry error.

    Raised when engine names are duplicated or not found.
    """
    pass
