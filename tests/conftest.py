"""
Shared pytest fixtures for fitness tracker MCP testing.
"""
import pytest

from mcp.server.fastmcp import FastMCP


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def create_test_app(module):
    """Helper to create a FastMCP app with a specific module registered."""
    app = FastMCP(f"Test Fitness Tracker {module.__name__}")
    app = module.register_tools(app)
    return app


@pytest.fixture
def running_args():
    """Tool arguments for one hour of running at 1000 steps."""
    return {
        "action_count": 1000,
        "activity_label": "Бег",
        "duration_hours": 1,
        "weight_kg": 70,
    }
