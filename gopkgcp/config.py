"""
Runtime configuration for gopkgcp.

Settings come from the process environment, optionally seeded from a .env file
in the working directory:

    GOPKGCP_GO    go binary to run (default: go)
    GOPKGCP_GODA  explicit path to the goda binary
    GOPATH        Go workspace used to locate goda (default: ~/go)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class Settings:
    go_bin: str = "go"
    goda_bin: str | None = None
    gopath: Path | None = None

    def goda_fallback(self) -> Path:
        """Location goda is installed to by `go install`."""
        gopath = self.gopath or Path.home() / "go"
        return gopath / "bin" / "goda"


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build settings from the environment.
    
    Args:
        dotenv: Load a .env file first (existing variables win).
        
    Returns:
        The resolved Settings.
    """
    if dotenv:
        load_dotenv()
    
    gopath = os.environ.get("GOPATH")
    return Settings(
        go_bin=os.environ.get("GOPKGCP_GO") or "go",
        goda_bin=os.environ.get("GOPKGCP_GODA") or None,
        # GOPATH may be a list; goda lands in the first entry
        gopath=Path(gopath.split(os.pathsep)[0]) if gopath else None,
    )
