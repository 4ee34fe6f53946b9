"""Spectroscopic data viewer tooling: geodata preparation, preview server and data client."""
