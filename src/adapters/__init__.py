"""Adapters over third-party generators and output sinks."""
