"""Threaded philosophers simulation: lenient number parsing, a lock-guarded integer, argument checks and the simulation itself."""

__version__ = "0.1.0"