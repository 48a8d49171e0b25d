"""Core utilities and shared infrastructure.

- config: Parser configuration loading and validation
- constants: Named constants for the polygon filter format
- exceptions: Custom exception hierarchy
"""
