#!/usr/bin/env python3
"""
gopkgcp - CLI Entry Point
=========================

Usage:
    python -m gopkgcp -pkg ./responses -o ./extracted
    python -m gopkgcp -pkg ./responses -o ./extracted -mod github.com/myorg/myproject
    python -m gopkgcp -pkg ./responses -o ./extracted -module-only=false -v
"""

import argparse
import sys
from pathlib import Path

from .config import load_settings
from .errors import ConfigurationError, EmptyResultError, ExternalToolError, RewriteError
from .extractor import extract_package
from .golang import GoToolchain
from .utils import console, err_console, print_header, print_error, print_warning, print_success, print_report_table, save_json

USAGE = """Usage: gopkgcp -pkg <package> -o <dir>

Example:
  gopkgcp -pkg ./responses -o ./extracted
"""

_TRUE = {"1", "t", "true", "yes", "y"}
_FALSE = {"0", "f", "false", "no", "n"}


def parse_bool(value: str) -> bool:
    """Parse a flag value like "true" or "0"."""
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gopkgcp",
        description="Extract a Go package and its dependencies into a standalone module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-pkg", dest="pkg", default="",
                        help="Package path to extract (e.g., ./responses)")
    parser.add_argument("-o", dest="output", default="",
                        help="Output directory")
    parser.add_argument("-mod", dest="mod", default="",
                        help="Override module name in extracted files (e.g., github.com/myorg/myproject)")
    parser.add_argument("-module-only", dest="module_only", type=parse_bool, nargs="?",
                        const=True, default=True, metavar="BOOL",
                        help="Only extract packages from the same module (default: true)")
    parser.add_argument("-v", dest="verbose", type=parse_bool, nargs="?",
                        const=True, default=False, metavar="BOOL",
                        help="Verbose output")
    parser.add_argument("-report", dest="report", type=Path,
                        help="Write the extraction report as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.pkg or not args.output:
        err_console.print(USAGE, markup=False, highlight=False)
        parser.print_help(sys.stderr)
        return 1
    
    output = Path(args.output)
    toolchain = GoToolchain(load_settings())
    
    if args.verbose:
        print_header("gopkgcp", f"Package: {args.pkg}\nOutput: {output}")
    
    try:
        report = extract_package(
            args.pkg,
            output,
            module_only=args.module_only,
            new_module=args.mod or None,
            verbose=args.verbose,
            toolchain=toolchain,
        )
    except ConfigurationError as e:
        print_error(f"Error getting module info: {e}")
        err_console.print("Make sure you're running this from a Go module directory", highlight=False)
        return 1
    except ExternalToolError as e:
        print_error(f"Error running goda: {e}")
        err_console.print("Make sure goda is installed: go install github.com/loov/goda@latest", highlight=False)
        return 1
    except (EmptyResultError, RewriteError) as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Error creating output directory: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    
    if report["tidy_ok"]:
        print_success("go mod tidy completed")
    
    if args.verbose or report["failed_count"]:
        print_report_table(report)
    
    if args.report:
        try:
            save_json(report, args.report)
        except OSError as e:
            # The extraction itself succeeded
            print_warning(f"Could not write report: {e}")
    
    console.print(f"\n[bold green]Done![/bold green] Your extracted package is ready at: {output}", highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
