"""Registration and reservation of coworking spaces, served over HTTP."""

__version__ = "0.1.0"