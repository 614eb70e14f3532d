"""Register transports and address helpers, and a generator of register access crates from YAML peripheral specs."""

__version__ = "0.1.0"