"""End-to-end server tests."""

import pytest
import json

from jcodescan_mcp.server import server, list_tools, call_tool


@pytest.mark.asyncio
async def test_server_lists_seven_tools():
    """Test that server lists all 7 tools."""
    tools = await list_tools()

    assert len(tools) == 7

    names = {t.name for t in tools}
    expected = {
        "analyze_folder", "list_analyses", "get_class_hierarchy",
        "get_class_outline", "search_endpoints", "get_enums", "get_report"
    }
    assert names == expected


@pytest.mark.asyncio
async def test_analyze_folder_tool_schema():
    """Test analyze_folder tool has correct schema."""
    tools = await list_tools()

    analyze = next(t for t in tools if t.name == "analyze_folder")

    assert "path" in analyze.inputSchema["properties"]
    assert "use_ai_summaries" in analyze.inputSchema["properties"]
    assert analyze.inputSchema["required"] == ["path"]


@pytest.mark.asyncio
async def test_search_endpoints_tool_schema():
    """Test search_endpoints tool has correct schema."""
    tools = await list_tools()

    search = next(t for t in tools if t.name == "search_endpoints")

    props = search.inputSchema["properties"]
    assert "repo" in props
    assert "query" in props
    assert "max_results" in props
    assert set(props["http_method"]["enum"]) == {"GET", "POST", "PUT", "DELETE"}


@pytest.mark.asyncio
async def test_call_analyze_then_query(java_project, storage_dir, monkeypatch):
    """Test analyzing through the server and querying the result."""
    monkeypatch.setenv("CODE_ANALYSIS_PATH", str(storage_dir))
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    content = await call_tool("analyze_folder", {"path": str(java_project)})
    result = json.loads(content[0].text)
    assert result["success"] is True
    assert result["repo"] == "local/shop"

    content = await call_tool("get_enums", {"repo": "shop"})
    result = json.loads(content[0].text)
    assert result["enums"][0]["name"] == "com.acme.model.Role"


@pytest.mark.asyncio
async def test_call_unknown_tool():
    """Test unknown tools return an error payload."""
    content = await call_tool("nope", {})
    assert json.loads(content[0].text) == {"error": "Unknown tool: nope"}


@pytest.mark.asyncio
async def test_call_missing_argument():
    """Test missing required arguments are reported, not raised."""
    content = await call_tool("get_class_outline", {"repo": "shop"})
    assert "error" in json.loads(content[0].text)


def test_server_name():
    """Test the server identifies itself."""
    assert server.name == "jcodescan-mcp"
