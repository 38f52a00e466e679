"""dm8-schema - DM8 catalog introspection."""

__version__ = "0.1.0"
