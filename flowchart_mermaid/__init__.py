"""Flowchart image to Mermaid conversion service."""

__version__ = "0.1.0"
