"""nwx -- Netwrix CLI for scaffolding Access Analyzer scanners."""

__version__ = "0.1.0"
