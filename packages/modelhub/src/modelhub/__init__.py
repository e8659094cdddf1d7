"""HTTP façade normalizing inference, metadata and demo lookups across model providers."""

__version__ = "0.1.0"
