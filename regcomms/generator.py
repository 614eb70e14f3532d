"""Reading peripheral specifications and writing generated crates to disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import yaml

from regcomms.errors import SpecError
from regcomms.peripheral_spec import PeripheralSpec

PathLike = Union[str, os.PathLike]


def _require_dir(path: PathLike, what: str) -> Path:
    directory = Path(path)
    if not directory.exists():
        raise FileNotFoundError(f"{what} dir path does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"{what} dir path is not a directory: {directory}")
    return directory


def read_peripheral_spec(pspec_path: PathLike) -> PeripheralSpec:
    """Load a peripheral specification from a YAML file."""
    with open(pspec_path, encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise SpecError(f"Failed to parse peripheral spec as yaml: {pspec_path}") from exc
    return PeripheralSpec.from_dict(data)


def generate_src_dir(pspec: PeripheralSpec, src_dir: PathLike) -> None:
    """Write every generated source file into the existing directory ``src_dir``."""
    directory = _require_dir(src_dir, "src")
    for filename, contents in pspec.generate_module():
        (directory / filename).write_bytes(contents.encode("utf-8"))


def generate_cargo_toml(
    pspec: PeripheralSpec, crate_dir: PathLike, reg_comms_override: Optional[str] = None
) -> None:
    """Write the crate manifest into the existing directory ``crate_dir``."""
    directory = _require_dir(crate_dir, "crate")
    contents = pspec.generate_cargo_toml(reg_comms_override)
    (directory / "Cargo.toml").write_bytes(contents.encode("utf-8"))


def generate_crate(
    spec_path: PathLike, crate_path: PathLike, reg_comms_override: Optional[str] = None
) -> None:
    """Generate sources and manifest of a crate from the specification at ``spec_path``."""
    crate_dir = _require_dir(crate_path, "crate")
    pspec = read_peripheral_spec(spec_path)
    src_dir = crate_dir / "src"
    try:
        src_dir.mkdir()
    except OSError:
        pass
    generate_src_dir(pspec, src_dir)
    generate_cargo_toml(pspec, crate_dir, reg_comms_override)