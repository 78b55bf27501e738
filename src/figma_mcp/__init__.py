"""
Figma MCP server: read-only Figma REST API tools for MCP hosts.
"""

__version__ = "0.1.0"
