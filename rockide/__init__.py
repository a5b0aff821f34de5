"""Positions, file URIs, text documents, semantic tokens, project discovery and vanilla world data for Bedrock add-ons."""

__version__ = "0.1.0"