"""MCP server for jcodescan-mcp."""

import asyncio
import json

from mcp.server import Server
from mcp.types import Tool, TextContent

from .config import AnalyzerConfig
from .tools.analyze_folder import analyze_folder
from .tools.list_analyses import list_analyses
from .tools.get_class_hierarchy import get_class_hierarchy
from .tools.get_class_outline import get_class_outline
from .tools.search_endpoints import search_endpoints
from .tools.get_enums import get_enums
from .tools.get_report import get_report, REPORT_KINDS


# Create server
server = Server("jcodescan-mcp")

_REPO_PROPERTY = {
    "type": "string",
    "description": "Analysis identifier (owner/name or just the folder name)"
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="analyze_folder",
            description="Analyze a local folder of Java sources. Extracts packages, classes, inheritance, methods, enums and REST endpoints, and saves the model to local storage.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to local folder (absolute or relative, supports ~ for home directory)"
                    },
                    "specific_class": {
                        "type": "string",
                        "description": "Optional class name; analyze only files for that class"
                    },
                    "output_dir": {
                        "type": "string",
                        "description": "Optional directory to write Markdown reports to"
                    },
                    "use_ai_summaries": {
                        "type": "boolean",
                        "description": "Use AI to summarize methods without javadoc (requires ANTHROPIC_API_KEY). When false, uses javadoc or signature fallback.",
                        "default": False
                    }
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="list_analyses",
            description="List all analyzed folders.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name="get_class_hierarchy",
            description="Get the inheritance tree of an analyzed folder. Classes whose superclass is outside the folder are roots.",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo": _REPO_PROPERTY,
                    "package": {
                        "type": "string",
                        "description": "Optional package; keep only trees rooted in it or its subpackages"
                    }
                },
                "required": ["repo"]
            }
        ),
        Tool(
            name="get_class_outline",
            description="Get one class's supertypes, subclasses, methods (signatures, summaries, annotations) and REST endpoints.",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo": _REPO_PROPERTY,
                    "class_name": {
                        "type": "string",
                        "description": "Qualified (com.acme.User) or simple (User) class name"
                    }
                },
                "required": ["repo", "class_name"]
            }
        ),
        Tool(
            name="search_endpoints",
            description="Search REST endpoints by path, method, class or media type.",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo": _REPO_PROPERTY,
                    "query": {
                        "type": "string",
                        "description": "Search query; empty lists every endpoint",
                        "default": ""
                    },
                    "http_method": {
                        "type": "string",
                        "description": "Optional filter by HTTP verb",
                        "enum": ["GET", "POST", "PUT", "DELETE"]
                    },
                    "max_results": {
                        "type": "integer",
                        "description": "Maximum number of results to return",
                        "default": 50
                    }
                },
                "required": ["repo"]
            }
        ),
        Tool(
            name="get_enums",
            description="List enums and their values.",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo": _REPO_PROPERTY,
                    "query": {
                        "type": "string",
                        "description": "Optional substring of the qualified enum name",
                        "default": ""
                    }
                },
                "required": ["repo"]
            }
        ),
        Tool(
            name="get_report",
            description="Render a Markdown report: API summary, class hierarchy, enum summary, or one class's method details.",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo": _REPO_PROPERTY,
                    "report": {
                        "type": "string",
                        "description": "Which report to render",
                        "enum": REPORT_KINDS
                    },
                    "class_name": {
                        "type": "string",
                        "description": "Class for the methods report"
                    }
                },
                "required": ["repo", "report"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    storage_path = AnalyzerConfig.from_env().storage_path

    try:
        if name == "analyze_folder":
            result = analyze_folder(
                path=arguments["path"],
                specific_class=arguments.get("specific_class"),
                output_dir=arguments.get("output_dir"),
                use_ai_summaries=arguments.get("use_ai_summaries", False),
                storage_path=storage_path
            )
        elif name == "list_analyses":
            result = list_analyses(storage_path=storage_path)
        elif name == "get_class_hierarchy":
            result = get_class_hierarchy(
                repo=arguments["repo"],
                package=arguments.get("package"),
                storage_path=storage_path
            )
        elif name == "get_class_outline":
            result = get_class_outline(
                repo=arguments["repo"],
                class_name=arguments["class_name"],
                storage_path=storage_path
            )
        elif name == "search_endpoints":
            result = search_endpoints(
                repo=arguments["repo"],
                query=arguments.get("query", ""),
                http_method=arguments.get("http_method"),
                max_results=arguments.get("max_results", 50),
                storage_path=storage_path
            )
        elif name == "get_enums":
            result = get_enums(
                repo=arguments["repo"],
                query=arguments.get("query", ""),
                storage_path=storage_path
            )
        elif name == "get_report":
            result = get_report(
                repo=arguments["repo"],
                report=arguments["report"],
                class_name=arguments.get("class_name"),
                storage_path=storage_path
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
