"""Status line components and a dynamic tiling window manager model."""

__version__ = "0.1.0"