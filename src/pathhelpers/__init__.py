"""
Search Path Helpers.

Pure string helpers that prepare paths and search patterns for a directory
listing call: split a path into directory and leaf, validate and normalize
search patterns, and build the search string handed to the OS.
"""

from pathhelpers.exceptions import (
    PathHelpersError,
    ValidationError,
    InvalidSearchPatternError,
    UnknownFlavorError,
    ConfigError,
    ConfigLoadError,
    ConfigValidationError
)
from pathhelpers.models import SplitResult, SearchRequest
from pathhelpers.roots import (
    RootClassifier,
    WindowsRootClassifier,
    PosixRootClassifier,
    available_flavors,
    get_classifier
)
from pathhelpers.validators import (
    SearchPatternValidator,
    check_search_pattern,
    normalize_search_pattern
)
from pathhelpers.paths import (
    PathHelpers,
    should_treat_as_current_directory,
    split_directory_file,
    get_directory_name,
    combine,
    get_full_search_string,
    trim_ending_directory_separator,
    prepare_search
)

__version__ = "1.0.0"
