"""
Package extraction for gopkgcp.

Drives the whole pipeline: resolve the module, list dependencies, copy the
in-module package directories, copy go.mod/go.sum, optionally rewrite the
module path and finally tidy the new module.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Protocol

from tqdm import tqdm

from .copier import copy_file, copy_tree
from .errors import EmptyResultError, ExternalToolError, RewriteError
from .golang import GoToolchain, ModuleInfo, scope_expression
from .rewriter import rewrite_module_references
from .selector import select_dependencies
from .utils import print_warning

# Copied from the module root next to the extracted packages
AUX_FILES = ("go.mod", "go.sum")


class Toolchain(Protocol):
    def module_info(self) -> ModuleInfo: ...
    def list_packages(self, expr: str) -> list[str]: ...
    def tidy(self, directory: Path) -> None: ...


def copy_aux_files(module_dir: Path, output: Path, verbose: bool = False) -> list[str]:
    """
    Copy go.mod and go.sum from the module root, if present.
    
    Failures are warnings only.
    
    Returns:
        Names of the files copied.
    """
    copied = []
    for name in AUX_FILES:
        src = module_dir / name
        if not src.is_file():
            continue
        try:
            copy_file(src, output / name)
        except OSError as e:
            print_warning(f"Could not copy {name}: {e}")
            continue
        copied.append(name)
        if verbose:
            print(f"[INFO] Copied {name}")
    return copied


def extract_package(
    package: str,
    output: Path,
    module_only: bool = True,
    new_module: str | None = None,
    verbose: bool = False,
    toolchain: Toolchain | None = None,
    boundary: bool = True
) -> dict:
    """
    Extract a package and its in-module dependencies into output.
    
    Args:
        package: Package path to extract, e.g. "./responses".
        output: Output directory (created if missing).
        module_only: Ask goda for same-module dependencies only.
        new_module: Replacement module path; None keeps the original.
        verbose: Print per-package progress instead of a progress bar.
        toolchain: go/goda adapter; defaults to GoToolchain().
        boundary: Match packages to the module on path boundaries.
        
    Returns:
        A report dict with counts and per-package failures.
        
    Raises:
        ConfigurationError: If not run inside a Go module.
        ExternalToolError: If goda is missing or fails.
        EmptyResultError: If goda lists no packages.
        OSError: If the output directory cannot be created.
        RewriteError: If the module path rewrite fails.
    """
    toolchain = toolchain or GoToolchain()
    output = Path(output)
    
    # Step 1: Module
    info = toolchain.module_info()
    if verbose:
        print(f"[INFO] Module: {info.path}")
        print(f"[INFO] Module dir: {info.dir}")
    
    # Step 2: Dependencies
    expr = scope_expression(package, module_only)
    if verbose:
        print(f"[INFO] Running: goda list {expr}")
    packages = toolchain.list_packages(expr)
    
    if not packages:
        raise EmptyResultError(f"No packages found for {package}")
    
    if verbose:
        print(f"[INFO] Found {len(packages)} packages to extract:")
        for pkg in packages:
            print(f"  - {pkg}")
    
    # Step 3: Copy
    output.mkdir(parents=True, exist_ok=True)
    
    copied_count = 0
    skipped_external = 0
    failed: list[dict] = []
    
    deps = select_dependencies(packages, info.path, boundary)
    for dep in tqdm(deps, unit="pkg", disable=verbose):
        if not dep.in_module:
            # Nothing under the module root to copy
            skipped_external += 1
            if verbose:
                print(f"[INFO] Skipping external: {dep.package}")
            continue
        
        src_dir = info.dir / dep.rel_path
        dst_dir = output / dep.rel_path
        if verbose:
            print(f"[INFO] Copying: {src_dir} -> {dst_dir}")
        
        try:
            copy_tree(src_dir, dst_dir)
        except OSError as e:
            tqdm.write(f"[ERROR] Error copying {dep.rel_path or '.'}: {e}", file=sys.stderr)
            failed.append({"package": dep.package, "error": str(e)})
            continue
        copied_count += 1
    
    print(f"[INFO] Extracted {copied_count} packages to {output}")
    
    aux_copied = copy_aux_files(info.dir, output, verbose)
    
    # Step 4: Rewrite
    rewritten: list[Path] = []
    if new_module:
        if verbose:
            print(f"[INFO] Replacing module {info.path} with {new_module}")
        try:
            rewritten = rewrite_module_references(output, info.path, new_module)
        except OSError as e:
            raise RewriteError(f"Error replacing module name: {e}") from e
        print(f"[INFO] Replaced module name with {new_module} in {len(rewritten)} files")
    
    # Step 5: Tidy
    if verbose:
        print(f"[INFO] Running go mod tidy in {output}")
    tidy_ok = True
    try:
        toolchain.tidy(output)
    except ExternalToolError as e:
        tidy_ok = False
        print_warning(str(e))
        print_warning(f"You may need to run it manually: cd {output} && go mod tidy")
    
    return {
        "module": info.path,
        "module_dir": str(info.dir),
        "package": package,
        "output": str(output),
        "new_module": new_module,
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "found_count": len(packages),
        "copied_count": copied_count,
        "failed_count": len(failed),
        "skipped_external_count": skipped_external,
        "failed": failed,
        "aux_files_copied": aux_copied,
        "rewritten_files": [str(p) for p in rewritten],
        "tidy_ok": tidy_ok,
    }
