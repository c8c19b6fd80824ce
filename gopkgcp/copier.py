"""
Selective directory copying for gopkgcp.

Mirrors a package directory into the output module, keeping only what
filters.should_copy_file allows and never entering skipped directories.
"""

import os
import shutil
import stat
from pathlib import Path

from .filters import should_copy_file, should_skip_dir


def copy_file(src: Path, dst: Path) -> None:
    """
    Copy a single file's bytes and permission bits.
    
    An existing destination is overwritten.
    
    Args:
        src: Source file.
        dst: Destination file (parent must exist).
    """
    src = Path(src)
    dst = Path(dst)
    mode = stat.S_IMODE(os.stat(src).st_mode)
    
    # A previous run may have left a read-only copy behind
    if dst.exists() and not os.access(dst, os.W_OK):
        os.chmod(dst, mode | stat.S_IWUSR)
    
    with open(src, 'rb') as fsrc, open(dst, 'wb') as fdst:
        shutil.copyfileobj(fsrc, fdst)
    os.chmod(dst, mode)


def copy_tree(src: Path, dst: Path) -> None:
    """
    Recursively copy the Go-relevant part of a directory.
    
    Any OSError at any depth aborts the whole copy and propagates to the
    caller; files already copied are left in place. Copying onto a tree
    produced by an earlier call is allowed.
    
    Args:
        src: Source directory.
        dst: Destination directory, created if missing.
        
    Raises:
        OSError: If the source cannot be read or the destination written.
    """
    src = Path(src)
    dst = Path(dst)
    mode = stat.S_IMODE(os.stat(src).st_mode)
    
    dst.mkdir(parents=True, exist_ok=True)
    
    with os.scandir(src) as entries:
        for entry in entries:
            if entry.is_dir():
                if should_skip_dir(entry.name):
                    continue
                copy_tree(Path(entry.path), dst / entry.name)
            elif should_copy_file(entry.name):
                copy_file(Path(entry.path), dst / entry.name)
    
    os.chmod(dst, mode)
