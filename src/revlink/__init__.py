"""revlink: resolve revision-pinned file addresses to navigation targets and web URLs."""

__version__ = "0.1.0"
