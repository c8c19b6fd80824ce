"""
gopkgcp
=======

Extract a Go package and its in-module dependencies into a new, self-contained
Go module, optionally renaming the module.
"""

__version__ = "1.0.0"

from .errors import (
    GopkgcpError,
    ConfigurationError,
    ExternalToolError,
    EmptyResultError,
    RewriteError,
)
from .filters import should_skip_dir, should_copy_file
from .copier import copy_file, copy_tree
from .selector import Dependency, select_dependencies
from .rewriter import rewrite_module_references
from .extractor import extract_package

__all__ = [
    "GopkgcpError",
    "ConfigurationError",
    "ExternalToolError",
    "EmptyResultError",
    "RewriteError",
    "should_skip_dir",
    "should_copy_file",
    "copy_file",
    "copy_tree",
    "Dependency",
    "select_dependencies",
    "rewrite_module_references",
    "extract_package",
]
