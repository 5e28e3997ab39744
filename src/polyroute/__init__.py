"""PolyRoute - multi-venue swap quoting and path selection."""

__version__ = "0.1.0"
