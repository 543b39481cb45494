"""Grid snake engine with sub-cell interpolation and a head-position signal."""

__version__ = "0.1.0"
