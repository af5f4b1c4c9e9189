from spotify_mcp import tool_registry
from spotify_mcp.models import ResourceUri, ToolName


def test_lists_exactly_three_tools():
    tools = tool_registry.list_tools()
    assert [tool.name for tool in tools] == [ToolName.SEARCH, ToolName.PLAY, ToolName.PAUSE]


def test_search_schema_declares_required_fields_and_bounds():
    search = tool_registry.list_tools()[0]
    schema = search.input_schema
    assert schema["required"] == ["q", "type"]
    assert schema["properties"]["type"]["enum"] == ["track", "artist", "album"]
    assert schema["properties"]["limit"] == {
        "type": "number",
        "minimum": 1,
        "maximum": 50,
        "default": 10,
    }


def test_play_and_pause_have_no_required_fields():
    _, play, pause = tool_registry.list_tools()
    assert "required" not in play.input_schema
    assert set(play.input_schema["properties"]) == {"uris", "context_uri", "position_ms"}
    assert pause.input_schema == {"type": "object", "properties": {}}


def test_listing_is_stable_across_calls():
    first = tool_registry.list_tools()
    first.clear()
    assert tool_registry.list_tools() == list(tool_registry.TOOLS)
    assert tool_registry.list_resources() == tool_registry.list_resources()


def test_lists_exactly_two_resources():
    resources = tool_registry.list_resources()
    assert [r.uri for r in resources] == [ResourceUri.CURRENTLY_PLAYING, ResourceUri.USER_PROFILE]
    assert all(r.mime_type == "application/json" for r in resources)
    assert [r.name for r in resources] == ["Currently Playing", "User Profile"]


def test_has_tool_matches_registered_names_only():
    assert tool_registry.has_tool("spotify.search")
    assert tool_registry.has_tool("spotify.pause")
    assert not tool_registry.has_tool("spotify.skip")
    assert not tool_registry.has_tool("search")
