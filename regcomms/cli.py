"""Command line entry point that generates a peripheral crate from a specification."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from regcomms.errors import SpecError
from regcomms.generator import (
    generate_cargo_toml,
    generate_crate,
    generate_src_dir,
    read_peripheral_spec,
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regcommsgen",
        description="Generate a register access crate from a peripheral specification.",
    )
    parser.add_argument("pspec_yaml", type=Path, help="peripheral specification in YAML")
    parser.add_argument("crate_directory", type=Path, help="directory of the crate to generate")
    parser.add_argument("-r", "--reg-comms-override", default=None, help="value of the regcomms dependency")
    parser.add_argument("-s", "--src-only", action="store_true", help="only generate the src directory")
    parser.add_argument("-c", "--cargo-only", action="store_true", help="only generate Cargo.toml")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the generator; returns the process exit status."""
    opts = _parser().parse_args(argv)
    try:
        if opts.src_only:
            pspec = read_peripheral_spec(opts.pspec_yaml)
            generate_src_dir(pspec, opts.crate_directory / "src")
        elif opts.cargo_only:
            pspec = read_peripheral_spec(opts.pspec_yaml)
            generate_cargo_toml(pspec, opts.crate_directory, opts.reg_comms_override)
        else:
            generate_crate(opts.pspec_yaml, opts.crate_directory, opts.reg_comms_override)
    except (SpecError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())