# ============================================================================
# SOURCEFILE: models.py
# RELPATH: search_path_helpers/src/pathhelpers/models.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Value objects returned by the path helpers
# ============================================================================

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SplitResult:
    """
    A path split into its parent directory and leaf name.

    Attributes:
        directory: Everything before the last separator past the root, or the
            whole (trailing-separator trimmed) path when no separator exists
            there. None only when the input path was None.
        leaf: Final segment after that separator. None when the path has no
            removable leaf, i.e. it is its own root.
    """
    directory: Optional[str]
    leaf: Optional[str]

    @property
    def is_root(self) -> bool:
        """True when the split path has no parent (it is a root)."""
        return self.directory is not None and self.leaf is None

    def join(self, separator: str) -> Optional[str]:
        """
        Rebuild the trimmed path the split was taken from.

        Args:
            separator: Separator to place between directory and leaf

        Returns:
            ``directory + separator + leaf``, ``directory`` alone for a root,
            or None if the split came from a None path
        """
        if self.directory is None:
            return None
        if self.leaf is None:
            return self.directory
        return f"{self.directory}{separator}{self.leaf}"


@dataclass(frozen=True)
class SearchRequest:
    """
    Everything a directory listing call needs for one pattern search.

    Attributes:
        directory: Directory the caller asked to search
        pattern: Search pattern after normalization
        search_string: Combined directory + pattern handed to the OS
        search_directory: Parent of ``search_string`` (where listing happens)
        search_criteria: Leaf of ``search_string`` that entries must match
    """
    directory: str
    pattern: str
    search_string: str
    search_directory: Optional[str]
    search_criteria: Optional[str]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "directory": self.directory,
            "pattern": self.pattern,
            "searchString": self.search_string,
            "searchDirectory": self.search_directory,
            "searchCriteria": self.search_criteria,
        }
