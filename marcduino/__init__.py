"""Dome panel servo sequences, a bounded byte FIFO and small bit and pin helpers."""

__version__ = "0.1.0"
__all__ = ["bits", "fifo", "panel_sequences", "toolbox"]