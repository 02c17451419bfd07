"""Integration tests for the MCP server end-to-end flow."""

from __future__ import annotations

from eagle_mcp.server import create_server
from eagle_mcp.tools import TOOL_REGISTRY


class TestServerCreation:
    def test_create_server(self) -> None:
        server = create_server()
        assert server is not None
        assert server.name == "eagle-mcp"


class TestEndToEnd:
    """Convert the elements of a small footprint the way an importer would."""

    def test_footprint_flow(self) -> None:
        outline = TOOL_REGISTRY["convert_wires"].handler(
            wires=[
                {"x1": -2, "y1": -1, "x2": 2, "y2": -1, "width": 0.2, "layer": 21},
                {"x1": 2, "y1": -1, "x2": 2, "y2": 1, "width": 0.2, "layer": 21},
                {"x1": 2, "y1": 1, "x2": -2, "y2": 1, "width": 0.2, "layer": 21},
                {"x1": -2, "y1": 1, "x2": -2, "y2": -1, "width": 0.2, "layer": 21},
            ],
        )
        assert outline["count"] == 1
        path = outline["paths"][0]["path"]
        assert len(path) == 5
        assert path[0] == path[-1]

        pads = TOOL_REGISTRY["convert_pads"].handler(
            smds=[
                {"name": "P$1", "x": -1, "y": 0, "dx": 0.8, "dy": 1, "layer": 1},
                {"name": "P$2", "x": 1, "y": 0, "dx": 0.8, "dy": 1, "layer": 1},
            ],
        )
        assert [p["name"] for p in pads["package_pads"]] == ["1", "2"]
        uuids = {p["uuid"] for p in pads["package_pads"]}
        assert {p["package_pad"] for p in pads["footprint_pads"]} == uuids

        texts = TOOL_REGISTRY["convert_texts"].handler(
            texts=[
                {"value": ">NAME", "x": 0, "y": 1.5, "size": 1.27, "layer": 25},
                {"value": ">VALUE", "x": 0, "y": -1.5, "size": 1.27, "layer": 27},
            ],
        )
        assert [(t["layer"], t["text"]) for t in texts["texts"]] == [
            ("top_names", "{{NAME}}"),
            ("top_values", "{{VALUE}}"),
        ]
