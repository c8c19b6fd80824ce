"""
Module path rewriting for gopkgcp.

Replaces every literal occurrence of the old module path with the new one in
the Go sources and go.mod of an extracted tree.
"""

import os
from pathlib import Path

from .filters import is_rewritable


def _raise(err: OSError):
    raise err


def rewrite_file(path: Path, old_module: str, new_module: str) -> bool:
    """
    Rewrite one file in place.
    
    The file is only written when its content actually changes.
    
    Returns:
        True if the file was rewritten.
    """
    # surrogateescape keeps non-UTF-8 bytes intact; newline='' keeps CRLF
    with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        content = f.read()
    
    new_content = content.replace(old_module, new_module)
    if new_content == content:
        return False
    
    with open(path, 'w', encoding='utf-8', errors='surrogateescape', newline='') as f:
        f.write(new_content)
    return True


def rewrite_module_references(root: Path, old_module: str, new_module: str) -> list[Path]:
    """
    Replace the module path in every .go file and go.mod under root.
    
    All subdirectories are visited. Files with other names are never touched,
    even if they mention the old module.
    
    Args:
        root: Directory to walk.
        old_module: Literal module path to search for.
        new_module: Replacement module path.
        
    Returns:
        Paths of the files that were rewritten.
        
    Raises:
        OSError: On the first unreadable directory or file; the walk stops.
        ValueError: If old_module is empty.
    """
    if not old_module:
        raise ValueError("Old module path must not be empty")

    rewritten = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            if not is_rewritable(filename):
                continue
            path = Path(dirpath) / filename
            if rewrite_file(path, old_module, new_module):
                rewritten.append(path)
    
    return rewritten
