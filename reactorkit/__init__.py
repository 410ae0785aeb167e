"""Threading, logging, time and byte-buffer primitives for event-driven network services."""

__version__ = "1.0.0"