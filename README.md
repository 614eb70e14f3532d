# regcomms

Tools for peripherals whose registers are reached over an embedded bus.

The package has two halves:

- **Register access** (`regcomms.comms`, `regcomms.i2c`): Python interfaces
  and helpers for talking to register-based devices.
- **Code generation** (`regcomms.generator`, `regcomms.cli` and the spec
  classes): reads a YAML peripheral description and writes a Rust crate with
  one module per register, typed register values and field accessors.

## Installing

```
pip install .
```

## Register access

`regcomms.comms` provides:

- `RegComms`, an abstract transport with `comms_read(reg_address, buf)`
  (fills the writable buffer `buf` and returns the byte count) and
  `comms_write(reg_address, buf)`. The `comms_read_async` /
  `comms_write_async` coroutines default to the blocking methods.
- `AccessProc`, an abstract access procedure with `proc_read` /
  `proc_write(peripheral, reg_address, buf)` and async counterparts that
  default to the blocking ones.
- `RegCommsError` and its subclass `IncompleteTransferError`.
- `to_big_endian(address, size)`, `to_little_endian(address, size)`,
  `from_big_endian(data)` and `from_little_endian(data)` for addresses of
  1, 2, 4 or 8 bytes. Other sizes, or an address that does not fit, raise
  `ValueError`.
- `block_on(awaitable)`, which runs an awaitable to completion without an
  event loop. It raises `RuntimeError` if the awaitable waits on an
  event-loop future.

`regcomms.i2c` provides `I2cComms(bus, address_size, i2c_address=0)` and
`I2cCommsAsync(bus, address_size, i2c_address=0)`. The register address is
sent big-endian in `address_size` bytes. The bus object must offer
`write_read(i2c_address, data, buf)` and `transaction(i2c_address,
operations)`, where the operations are a list of byte strings to write. For
`I2cCommsAsync` both must be coroutines. Its blocking `comms_read` /
`comms_write` run the coroutines with `block_on`. Any error from the bus is
raised again as `RegCommsError`. `with_address` returns a copy for another
device address, and `set_address` changes it in place.

```python
from regcomms.i2c import I2cComms

comms = I2cComms(bus, address_size=1, i2c_address=0x68)
buf = bytearray(2)
comms.comms_read(0x3B, buf)
comms.comms_write(0x6B, b"\x00")
```

## Generating a crate

```
regcommsgen path/to/peripheral.yaml path/to/crate_dir
```

This creates `crate_dir/src` if needed. It then writes `lib.rs` and one
`<register>.rs` per register, and writes `crate_dir/Cargo.toml`. The crate
directory must already exist.

Options:

- `-r`, `--reg-comms-override TEXT`: the text written after `regcomms = ` in
  the generated `Cargo.toml`, for example `'{ path = "../regcomms" }'`.
  Without it the line reads `regcomms = {{ }}`.
- `-s`, `--src-only`: only regenerate the files in `crate_dir/src`.
- `-c`, `--cargo-only`: only regenerate `crate_dir/Cargo.toml`.

On a malformed spec or a file system error the command prints `error: ...`
to standard error and exits with status 1.

The same steps are available from Python:

```python
from regcomms.generator import (
    generate_cargo_toml,
    generate_crate,
    generate_src_dir,
    read_peripheral_spec,
)

pspec = read_peripheral_spec("peripheral.yaml")
generate_src_dir(pspec, "my_crate/src")
generate_cargo_toml(pspec, "my_crate", None)
generate_crate("peripheral.yaml", "my_crate", None)
```

`PeripheralSpec.generate_module()` returns the `(filename, contents)` pairs
without touching the disk. `PeripheralSpec.generate_cargo_toml(override)`
returns the manifest text.

## Peripheral spec format

```yaml
name: QuantumFluxSensor
address_len: 4          # 1, 2, 4 or 8 bytes
byte_order: Big         # Big or Little
trait_members:
  - name: delay
    generic_type: D
    trait_bound: embedded_hal_async::delay::DelayNs
non_standard_access_procs:
  - proc_name: Mreg1
    struct_path: crate::handwritten::Mreg1
extra_mods: [handwritten]
registers:
  - name: fifo_config
    address: 0x20
    size: 1
    readable: true
    writable: true
    reset_val: 0xe3
    fields:
      - name: fifo_src
        field_pos: "[7:5]"
      - name: fifo_en
        field_pos: "2"
```

A field position is either a single bit index such as `"4"` or an inclusive
range `"[high:low]"`, with `high` not less than `low`. A register may name an
`access_proc` from `non_standard_access_procs`. A register may also be marked
`data_port: true`, which is only allowed for registers of size 1. The spec
classes (`PeripheralSpec`, `RegisterSpec`, `FieldSpec`, `FieldPos`,
`AccessProcSpec`, `TraitMember`, `StructSpec`, `Endian`) load from plain
dictionaries with `from_dict` and convert back with `to_dict`. Malformed specs
raise `regcomms.errors.SpecError`.

## What it does not do

- The generator writes Rust sources only. It produces no Python classes for
  registers or fields.
- `struct_defns` entries are read and kept on the spec, but no code is
  generated from them.
- Modules listed in `extra_mods` and the types named by
  `non_standard_access_procs` are only referenced. You write them yourself.