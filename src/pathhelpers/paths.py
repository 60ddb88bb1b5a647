# ============================================================================
# FILE: paths.py
# RELPATH: search_path_helpers/src/pathhelpers/paths.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Directory/file splitting and search string construction
# ============================================================================

"""
Path Helpers Module.

Lightweight string operations used before a directory listing call: split a
full path into directory and leaf, join a directory with a search pattern,
and trim trailing separators. No operation renormalizes the path or touches
the file system, so callers must pass already validated full paths.
"""

from typing import Optional

from pathhelpers.exceptions import InvalidSearchPatternError
from pathhelpers.models import SearchRequest, SplitResult
from pathhelpers.roots import RootClassifier, get_classifier
from pathhelpers.validators import SearchPatternValidator


class PathHelpers:
    """
    Path string helpers bound to one platform's root classifier.

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(self, classifier: Optional[RootClassifier] = None):
        """
        Initialize helpers.

        Args:
            classifier: Path rules to apply (defaults to the Windows rules)
        """
        self.classifier = classifier or get_classifier()
        self.pattern_validator = SearchPatternValidator(self.classifier)

    # ---------------- drive roots ----------------

    def should_treat_as_current_directory(self, path: str) -> bool:
        """
        Detect a bare drive specifier such as ``C:``.

        ``C:`` means "the current directory on drive C", not the drive root,
        so callers substitute that directory before going further.

        Args:
            path: Any path string

        Returns:
            True if ``path`` is exactly a drive letter and volume separator
        """
        return len(path) == 2 and self.classifier.is_volume_separator(path[1])

    # ---------------- splitting ----------------

    def ends_in_directory_separator(self, path: str) -> bool:
        """True if the last character of ``path`` is a directory separator."""
        return bool(path) and self.classifier.is_directory_separator(path[-1])

    def split_directory_file(self, path: Optional[str], root_length: Optional[int] = None) -> SplitResult:
        """
        Split a full path into its directory and leaf name.

        A trailing separator past the root is ignored, and separators inside
        the root never split. When no separator is found past the root the
        path is its own root: the trimmed path comes back as the directory
        and the leaf is None.

        Args:
            path: Validated full path, or None
            root_length: Precomputed root length (computed when omitted)

        Returns:
            SplitResult; both fields None when ``path`` is None
        """
        if path is None:
            return SplitResult(None, None)

        length = len(path)
        if root_length is None:
            root_length = self.classifier.get_root_length(path)

        # ignore a trailing slash
        if length > root_length and self.ends_in_directory_separator(path):
            length -= 1

        for pivot in range(length - 1, root_length - 1, -1):
            if self.classifier.is_directory_separator(path[pivot]):
                return SplitResult(path[:pivot], path[pivot + 1:length])

        return SplitResult(path[:length], None)

    def get_directory_name(self, path: Optional[str]) -> Optional[str]:
        """
        Parent directory of ``path`` without renormalizing it.

        Args:
            path: Validated full path, or None

        Returns:
            Parent directory, or None when ``path`` is a root (never ``""``)
        """
        result = self.split_directory_file(path)
        return None if result.leaf is None else result.directory

    # ---------------- joining ----------------

    def combine(self, path1: str, path2: str) -> str:
        """
        Join two path fragments with exactly one separator.

        A rooted ``path2`` replaces ``path1``; an empty side yields the other.
        """
        if not path2:
            return path1
        if not path1 or self.classifier.is_path_rooted(path2):
            return path2

        last = path1[-1]
        if self.classifier.is_directory_separator(last) or self.classifier.is_volume_separator(last):
            return path1 + path2
        return path1 + self.classifier.directory_separator + path2

    def get_full_search_string(self, full_path: str, search_pattern: str) -> str:
        """
        Build the string handed to the OS directory listing call.

        Args:
            full_path: Directory to search
            search_pattern: Relative, non-empty search pattern

        Returns:
            Joined search string, ending in ``*`` whenever the join would
            otherwise end in a separator or volume separator

        Raises:
            InvalidSearchPatternError: If ``search_pattern`` is empty or rooted
        """
        if not search_pattern:
            raise InvalidSearchPatternError(search_pattern, "Pattern is empty")
        if self.classifier.is_path_rooted(search_pattern):
            raise InvalidSearchPatternError(search_pattern, "Pattern must be a relative path")

        search_string = self.combine(full_path, search_pattern)

        # A bare trailing separator finds nothing; list the whole directory instead.
        last = search_string[-1]
        if self.classifier.is_directory_separator(last) or self.classifier.is_volume_separator(last):
            search_string += "*"

        return search_string

    def trim_ending_directory_separator(self, path: str) -> str:
        """Drop one trailing directory separator, if there is one."""
        return path[:-1] if self.ends_in_directory_separator(path) else path

    # ---------------- search preparation ----------------

    def prepare_search(self, directory: str, search_pattern: str) -> SearchRequest:
        """
        Normalize a pattern and work out where and what to list.

        Args:
            directory: Full path of the directory to search
            search_pattern: Pattern supplied by the caller

        Returns:
            SearchRequest with the search string and its directory/criteria

        Raises:
            InvalidSearchPatternError: If the pattern is invalid
        """
        pattern = self.pattern_validator.normalize_search_pattern(search_pattern)
        search_string = self.get_full_search_string(directory, pattern)
        search_directory, search_criteria = self._split_search_string(search_string)

        return SearchRequest(
            directory=directory,
            pattern=pattern,
            search_string=search_string,
            search_directory=search_directory,
            search_criteria=search_criteria,
        )

    def _split_search_string(self, search_string: str):
        """
        Split a search string at its last separator.

        Unlike ``split_directory_file`` the separator ending a root does
        split here, so ``C:\\*.txt`` lists ``C:\\`` for ``*.txt``. The root
        itself always stays with the directory.
        """
        root_length = self.classifier.get_root_length(search_string)

        for pivot in range(len(search_string) - 1, -1, -1):
            if self.classifier.is_directory_separator(search_string[pivot]):
                return search_string[:max(pivot, root_length)], search_string[pivot + 1:]

        # no separator: "C:*.txt" or a bare relative pattern
        return search_string[:root_length] or None, search_string[root_length:]


# ============================================================================
# Convenience Functions
# ============================================================================

def _helpers(flavor: Optional[str]) -> PathHelpers:
    return PathHelpers(get_classifier(flavor))


def should_treat_as_current_directory(path: str, flavor: Optional[str] = None) -> bool:
    return _helpers(flavor).should_treat_as_current_directory(path)


def split_directory_file(path: Optional[str],
                         root_length: Optional[int] = None,
                         flavor: Optional[str] = None) -> SplitResult:
    return _helpers(flavor).split_directory_file(path, root_length)


def get_directory_name(path: Optional[str], flavor: Optional[str] = None) -> Optional[str]:
    return _helpers(flavor).get_directory_name(path)


def combine(path1: str, path2: str, flavor: Optional[str] = None) -> str:
    return _helpers(flavor).combine(path1, path2)


def get_full_search_string(full_path: str, search_pattern: str, flavor: Optional[str] = None) -> str:
    return _helpers(flavor).get_full_search_string(full_path, search_pattern)


def trim_ending_directory_separator(path: str, flavor: Optional[str] = None) -> str:
    return _helpers(flavor).trim_ending_directory_separator(path)


def prepare_search(directory: str, search_pattern: str, flavor: Optional[str] = None) -> SearchRequest:
    return _helpers(flavor).prepare_search(directory, search_pattern)


# ============================================================================
# LIFECYCLE STATUS: Proposed
# DEPENDENCIES: exceptions.py, models.py, roots.py, validators.py
# TESTS: tests/unit/test_paths.py
# ============================================================================
