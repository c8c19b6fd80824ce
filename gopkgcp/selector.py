"""
Dependency selection for gopkgcp.

Splits the package list reported by the dependency lister into packages that
live inside the current module (and so have a directory to copy) and external
packages.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass
class Dependency:
    """
    One entry of the dependency set.
    
    rel_path is the directory relative to the module root, "" for the root
    package itself and None for external packages.
    """
    package: str
    in_module: bool
    rel_path: str | None = None


def is_in_module(package: str, module: str, boundary: bool = True) -> bool:
    """
    Check if a package identifier belongs to a module.
    
    Args:
        package: Package identifier, e.g. "github.com/x/foo/bar".
        module: Module identifier, e.g. "github.com/x/foo".
        boundary: Require the prefix to end on a path element, so that
            "github.com/x/foobar" is not inside "github.com/x/foo".
            With boundary=False this is a plain prefix test.
            
    Returns:
        True if the package is inside the module.
    """
    if not package.startswith(module):
        return False
    if not boundary:
        return True
    rest = package[len(module):]
    return rest == "" or rest.startswith("/")


def relative_path(package: str, module: str) -> str:
    """Directory of an in-module package relative to the module root."""
    rel = package[len(module):] if package.startswith(module) else package
    if rel.startswith("/"):
        rel = rel[1:]
    return rel


def select_dependencies(
    packages: Iterable[str], 
    module: str, 
    boundary: bool = True
) -> list[Dependency]:
    """
    Classify every package of a dependency set.
    
    Input order is kept and nothing is deduplicated: a package listed twice
    is copied twice.
    
    Args:
        packages: Package identifiers in lister order.
        module: The current module identifier.
        boundary: See is_in_module.
        
    Returns:
        One Dependency per input package.
    """
    deps = []
    for pkg in packages:
        if is_in_module(pkg, module, boundary):
            deps.append(Dependency(pkg, True, relative_path(pkg, module)))
        else:
            deps.append(Dependency(pkg, False))
    return deps
