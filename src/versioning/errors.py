"""Errors raised while resolving browser queries.

Every error is a ``ValueError`` subclass carrying the offending piece of the
query, so callers can report it without parsing the message.
"""

from __future__ import annotations


class BrowserslistError(ValueError):
    """Base class for all query resolution failures."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class UnknownQuery(BrowserslistError):
    """Raised when a clause matches no selector."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown browser query `{text}`", text)


class BrowserNotFound(BrowserslistError):
    """Raised when a selector needs a browser name that is not in the dataset."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown browser {name}", name)


class VersionRequired(BrowserslistError):
    """Raised for a bare browser name without a version qualifier."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Specify versions in Browserslist query for browser {name}", name
        )


class ParsePercentage(BrowserslistError):
    """Raised when a percentage literal cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse percentage `{text}`", text)


class ParseVersionsCount(BrowserslistError):
    """Raised when a version count literal cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse versions count `{text}`", text)


class ParseYears(BrowserslistError):
    """Raised when a year count literal cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse years `{text}`", text)


class InvalidDate(BrowserslistError):
    """Raised when a `since` clause names a date that does not exist."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date `{text}`", text)


class UnknownBrowserVersion(BrowserslistError):
    """Raised when a browser exists but the requested version does not."""

    def __init__(self, name: str, version: str) -> None:
        super().__init__(f"Unknown version {version} of {name}", f"{name} {version}")
        self.name = name
        self.version = version


class UnknownElectronVersion(BrowserslistError):
    """Raised when an Electron version is missing from the Chromium map."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Unknown version {version} of electron", version)


class UnknownNodeVersion(BrowserslistError):
    """Raised when no Node.js release matches the requested version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Unknown version {version} of Node.js", version)


class CurrentNodeUnavailable(BrowserslistError):
    """Raised when `current node` is queried but Node.js cannot be probed."""

    def __init__(self, reason: str = "") -> None:
        message = "Cannot determine the current Node.js version"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "current node")


class ConfigError(BrowserslistError):
    """Raised when browserslist configuration cannot be loaded."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message, path)
