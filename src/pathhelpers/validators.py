# ============================================================================
# FILE: validators.py
# RELPATH: search_path_helpers/src/pathhelpers/validators.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Search pattern validation and normalization
# ============================================================================

"""
Validators Module.

Checks and normalizes the search patterns callers pass to a directory
listing (``*.txt``, ``a?c``). Only the pattern text is inspected; nothing
here matches patterns against file names or touches the file system.
"""

from typing import Optional

from pathhelpers.exceptions import InvalidSearchPatternError
from pathhelpers.roots import RootClassifier, get_classifier


class SearchPatternValidator:
    """
    Validates search patterns for safety.

    ``..`` may only appear inside a file or directory name. A pattern may not
    use it to move up a directory:

        accepted: ``a..b``  ``..ab``  ``x...y``
        rejected: ``..``  ``ab..``  ``..\\ab``  ``a..b\\c..``
    """

    # matches the OS: plain spaces only
    TRIM_END_CHARS = " "

    def __init__(self, classifier: Optional[RootClassifier] = None):
        """
        Initialize validator.

        Args:
            classifier: Path rules deciding what counts as a separator
                (defaults to the Windows rules)
        """
        self.classifier = classifier or get_classifier()

    def check_search_pattern(self, search_pattern: str) -> None:
        """
        Reject a pattern that uses ``..`` to ascend.

        Args:
            search_pattern: Pattern to check

        Raises:
            InvalidSearchPatternError: If a ``..`` ends the pattern or is
                followed by a directory separator
        """
        index = search_pattern.find("..")
        while index != -1:
            # a name may end in neither ".." nor "..<sep>"
            end = index + 2
            if end == len(search_pattern) or self.classifier.is_directory_separator(search_pattern[end]):
                raise InvalidSearchPatternError(
                    search_pattern,
                    "'..' may not be used to move up a directory"
                )
            index = search_pattern.find("..", end)

    def is_valid_search_pattern(self, search_pattern: str) -> bool:
        """
        Check a pattern without raising.

        Args:
            search_pattern: Pattern to check

        Returns:
            True if valid, False otherwise
        """
        try:
            self.check_search_pattern(search_pattern)
            return True
        except InvalidSearchPatternError:
            return False

    def normalize_search_pattern(self, search_pattern: str) -> str:
        """
        Normalize a pattern the way the OS would, then validate it.

        Trailing spaces are trimmed (nothing else, and never leading ones),
        and a bare ``.`` becomes ``*`` so it lists everything like ``dir .``.

        Args:
            search_pattern: Pattern supplied by the caller

        Returns:
            Normalized pattern

        Raises:
            InvalidSearchPatternError: If the normalized pattern is invalid
        """
        normalized = search_pattern.rstrip(self.TRIM_END_CHARS)

        if normalized == ".":
            normalized = "*"

        self.check_search_pattern(normalized)
        return normalized


# ============================================================================
# Convenience Functions
# ============================================================================

def check_search_pattern(search_pattern: str, flavor: Optional[str] = None) -> None:
    """
    Convenience function for pattern validation.

    Raises:
        InvalidSearchPatternError: If the pattern ascends with ``..``
    """
    SearchPatternValidator(get_classifier(flavor)).check_search_pattern(search_pattern)


def normalize_search_pattern(search_pattern: str, flavor: Optional[str] = None) -> str:
    """Convenience function for pattern normalization."""
    return SearchPatternValidator(get_classifier(flavor)).normalize_search_pattern(search_pattern)


# ============================================================================
# LIFECYCLE STATUS: Proposed
# DEPENDENCIES: exceptions.py, roots.py
# TESTS: tests/unit/test_validators.py
# ============================================================================
