"""Rules engine for two-player chess: move generation, check detection
and turn sequencing."""

__version__ = "0.1.0"
