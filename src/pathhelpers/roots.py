# ============================================================================
# FILE: roots.py
# RELPATH: search_path_helpers/src/pathhelpers/roots.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Root classifiers - root length and separator rules per platform
# ============================================================================

"""
Root Classifiers.

A root classifier knows one platform's path rules: which characters separate
directories, where the root of a path (drive, share, leading slash) ends, and
whether a path is rooted at all. The helpers in ``paths`` and ``validators``
take a classifier instead of asking the running OS, so they stay pure and
can be exercised for any platform on any platform.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pathhelpers.exceptions import UnknownFlavorError


class RootClassifier(ABC):
    """
    Abstract path-rule provider.

    Subclasses set the separator attributes and implement
    ``get_root_length`` and ``is_path_rooted``.
    """

    name: str = ""
    directory_separator: str = "/"
    alt_directory_separator: str = "/"
    volume_separator: Optional[str] = None

    def is_directory_separator(self, ch: str) -> bool:
        """True if ``ch`` divides path segments on this platform."""
        return ch == self.directory_separator or ch == self.alt_directory_separator

    def is_volume_separator(self, ch: str) -> bool:
        """True if ``ch`` is this platform's drive/volume separator."""
        return self.volume_separator is not None and ch == self.volume_separator

    @abstractmethod
    def get_root_length(self, path: str) -> int:
        """
        Count the leading characters of ``path`` that form its root.

        Args:
            path: Path to inspect

        Returns:
            Root length, between 0 and ``len(path)``
        """

    @abstractmethod
    def is_path_rooted(self, path: str) -> bool:
        """True if ``path`` is anchored to a root rather than relative."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WindowsRootClassifier(RootClassifier):
    """
    Windows path rules.

    Roots recognized:
        ``C:``            drive-relative, length 2
        ``C:\\``           drive root, length 3
        ``\\``             current drive root, length 1
        ``\\\\server\\share``  UNC share (separator after the share excluded)
        ``\\\\?\\C:\\``      extended-length drive root, length 7
        ``\\\\?\\UNC\\server\\share``  extended-length UNC share
    """

    name = "windows"
    directory_separator = "\\"
    alt_directory_separator = "/"
    volume_separator = ":"

    EXTENDED_PREFIX = "\\\\?\\"
    EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"

    def get_root_length(self, path: str) -> int:
        length = len(path)
        i = 0
        volume_separator_length = 2
        unc_root_length = 2

        extended = path.startswith(self.EXTENDED_PREFIX)
        extended_unc = path.startswith(self.EXTENDED_UNC_PREFIX)
        if extended:
            if extended_unc:
                unc_root_length = len(self.EXTENDED_UNC_PREFIX)
            else:
                volume_separator_length += len(self.EXTENDED_PREFIX)

        if (not extended or extended_unc) and length > 0 and self.is_directory_separator(path[0]):
            i = 1
            if extended_unc or (length > 1 and self.is_directory_separator(path[1])):
                # UNC: skip the server and share names
                i = unc_root_length
                remaining = 2
                while i < length:
                    if self.is_directory_separator(path[i]):
                        remaining -= 1
                        if remaining == 0:
                            break
                    i += 1
        elif length >= volume_separator_length and path[volume_separator_length - 1] == self.volume_separator:
            i = volume_separator_length
            if length > volume_separator_length and self.is_directory_separator(path[volume_separator_length]):
                i += 1

        return i

    def is_path_rooted(self, path: str) -> bool:
        length = len(path)
        return (
            (length >= 1 and self.is_directory_separator(path[0]))
            or (length >= 2 and path[1] == self.volume_separator)
        )


class PosixRootClassifier(RootClassifier):
    """POSIX path rules: a single ``/`` root, no drives."""

    name = "posix"
    directory_separator = "/"
    alt_directory_separator = "/"
    volume_separator = None

    def get_root_length(self, path: str) -> int:
        return 1 if path.startswith("/") else 0

    def is_path_rooted(self, path: str) -> bool:
        return path.startswith("/")


# ============================================================================
# Classifier Registry
# ============================================================================

DEFAULT_FLAVOR = "windows"

_CLASSIFIERS: Dict[str, RootClassifier] = {
    WindowsRootClassifier.name: WindowsRootClassifier(),
    PosixRootClassifier.name: PosixRootClassifier(),
}


def available_flavors() -> List[str]:
    """List the registered flavor names."""
    return sorted(_CLASSIFIERS)


def get_classifier(flavor: Optional[str] = None) -> RootClassifier:
    """
    Look up the classifier for a flavor.

    Args:
        flavor: ``"windows"`` or ``"posix"``; None selects the default

    Returns:
        Shared (stateless) classifier instance

    Raises:
        UnknownFlavorError: If no classifier is registered for ``flavor``
    """
    key = (flavor or DEFAULT_FLAVOR).lower()
    try:
        return _CLASSIFIERS[key]
    except KeyError:
        raise UnknownFlavorError(flavor, available_flavors())
