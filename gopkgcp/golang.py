"""
Go toolchain integration for gopkgcp.

Wraps the three external collaborators behind one small interface:
- `go list -m` for the current module path and directory
- `goda list` for the dependency set of a package
- `go mod tidy` for the extracted module
"""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .config import Settings, load_settings
from .errors import ConfigurationError, ExternalToolError

# goda prints this column header before the package list
GODA_HEADER = "ID"


@dataclass
class ModuleInfo:
    path: str
    dir: Path


def parse_package_list(output: str) -> list[str]:
    """
    Parse `goda list` output into package identifiers.
    
    Blank lines and the "ID" header are dropped; order is kept.
    """
    packages = []
    for line in output.splitlines():
        line = line.strip()
        if line and line != GODA_HEADER:
            packages.append(line)
    return packages


def scope_expression(package: str, module_only: bool) -> str:
    """Build the goda selector for a package and its dependencies."""
    return package + (":mod" if module_only else ":all")


class GoToolchain:
    """
    Runs the go and goda binaries as subprocesses.
    
    No timeouts are applied; each call waits for the tool to finish.
    """
    
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or load_settings()
    
    def _go(self, *args: str) -> str:
        cmd = [self.settings.go_bin, *args]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            raise ConfigurationError(f"could not run {self.settings.go_bin}: {e}")
        
        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise ConfigurationError(f"{' '.join(cmd)} failed: {detail}")
        return result.stdout.strip()
    
    def module_info(self) -> ModuleInfo:
        """
        Resolve the module containing the working directory.
        
        Raises:
            ConfigurationError: If not inside a Go module.
        """
        path = self._go("list", "-m")
        directory = self._go("list", "-m", "-f", "{{.Dir}}")
        if not path or not directory:
            raise ConfigurationError("go list -m returned no module")
        return ModuleInfo(path=path, dir=Path(directory))
    
    def find_goda(self) -> str:
        """
        Locate the goda binary.
        
        Search order: PATH, GOPKGCP_GODA, then $GOPATH/bin/goda.
        
        Raises:
            ExternalToolError: If goda is not installed.
        """
        found = shutil.which("goda")
        if found:
            return found
        
        if self.settings.goda_bin and Path(self.settings.goda_bin).is_file():
            return self.settings.goda_bin
        
        fallback = self.settings.goda_fallback()
        if fallback.is_file():
            return str(fallback)
        
        raise ExternalToolError(f"goda not found in PATH or {fallback}")
    
    def list_packages(self, expr: str) -> list[str]:
        """
        Run `goda list` for a selector expression.
        
        Args:
            expr: goda selector, e.g. "./responses:mod".
            
        Returns:
            Package identifiers in goda's order.
            
        Raises:
            ExternalToolError: If goda is missing or fails; the message carries
                goda's stderr.
        """
        goda = self.find_goda()
        try:
            result = subprocess.run([goda, "list", expr], capture_output=True, text=True, check=False)
        except OSError as e:
            raise ExternalToolError(f"could not run goda: {e}")
        
        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise ExternalToolError(f"goda failed: {detail}")
        
        return parse_package_list(result.stdout)
    
    def tidy(self, directory: Path) -> None:
        """
        Run `go mod tidy` inside directory, sharing this process's output.
        
        Raises:
            ExternalToolError: If go is missing or tidy fails.
        """
        try:
            result = subprocess.run([self.settings.go_bin, "mod", "tidy"], cwd=directory, check=False)
        except OSError as e:
            raise ExternalToolError(f"could not run go mod tidy: {e}")
        
        if result.returncode != 0:
            raise ExternalToolError(f"go mod tidy failed: exit code {result.returncode}")
