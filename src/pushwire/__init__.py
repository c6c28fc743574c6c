"""pushwire: wire codecs for push rules and device key management payloads."""

__version__ = "0.3.0"
