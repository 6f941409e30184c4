"""
Fitness Tracker MCP Server

Computes distance, mean speed and spent calories for running, walking
and swimming trainings from raw tracker counters, and exposes them via
the Model Context Protocol (MCP).

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from ftracker import training


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("Fitness Tracker v1.0")

    # Register training metrics tools
    app = training.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    - LOG_LEVEL: Logging level (default: INFO)
    """
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())

    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
