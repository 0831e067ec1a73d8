"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: KML namespace, element names, flag defaults
- exceptions: Custom exception hierarchy
"""
