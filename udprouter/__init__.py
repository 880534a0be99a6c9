"""UDP router node: link and neighbour configuration, message wire format, message queue and sender menu."""

__version__ = "0.1.0"

__all__ = ["__version__"]