"""
connectfour.interfaces - Terminal interfaces for Connect Four

This package contains the console input/output adapters and the
command-line entry point.
"""

# Don't import anything here to avoid circular imports
__all__ = []
