"""
Name-based filtering rules for the tree copier and the module rewriter.

Includes:
- Directory skip list (tests, vendored code, VCS metadata)
- Go source / important file allow-list
- Rewriter name filter
"""

# Directory names (or suffixes) that are never copied
SKIP_DIRS = ("testdata", "vendor", ".git", "_test")

# Non-Go files that belong in an extracted module
IMPORTANT_FILES = ("go.mod", "go.sum", "LICENSE", "README.md")

GO_EXT = ".go"
GO_TEST_SUFFIX = "_test.go"


def should_skip_dir(name: str) -> bool:
    """
    Check if a directory should be left out of the copy entirely.
    
    Matching is by suffix, so "foo_test" is skipped but "protest" is not.
    
    Args:
        name: A single directory name.
        
    Returns:
        True if the directory must not be traversed.
    """
    return any(name == s or name.endswith(s) for s in SKIP_DIRS)


def should_copy_file(name: str) -> bool:
    """
    Check if a file belongs in the extracted module.
    
    Args:
        name: A single file name.
        
    Returns:
        True for non-test Go sources and the important module files.
    """
    if name.endswith(GO_EXT):
        return not name.endswith(GO_TEST_SUFFIX)
    return name in IMPORTANT_FILES


def is_rewritable(name: str) -> bool:
    """Check if a file may contain import paths that need rewriting."""
    return name.endswith(GO_EXT) or name == "go.mod"
