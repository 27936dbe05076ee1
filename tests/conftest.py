"""
Pytest configuration and shared fixtures.
"""

import pytest


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A mock server to register tools on."""
    return MockMCPServer("test")
