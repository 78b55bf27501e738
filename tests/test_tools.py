import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS

from figma_mcp.tools import (
    CATALOG,
    TOOLS_BY_NAME,
    FileInfoArgs,
    FileKeyArgs,
    FileNodesArgs,
    ListFilesArgs,
    validate_arguments,
)

FILE_KEY_TOOLS = [
    "get_file_versions",
    "get_file_comments",
    "get_file_info",
    "get_components",
    "get_styles",
    "get_file_nodes",
]


def _invalid_message(name, arguments):
    with pytest.raises(McpError) as excinfo:
        validate_arguments(TOOLS_BY_NAME[name], arguments)
    assert excinfo.value.error.code == INVALID_PARAMS
    return excinfo.value.error.message


def test_catalog_names_and_order():
    assert [d.name for d in CATALOG] == [
        "list_files",
        "get_file_versions",
        "get_file_comments",
        "get_file_info",
        "get_components",
        "get_styles",
        "get_file_nodes",
    ]
    assert len(TOOLS_BY_NAME) == len(CATALOG)


def test_catalog_schemas():
    info = TOOLS_BY_NAME["get_file_info"].tool.inputSchema
    assert info["required"] == ["file_key"]
    assert info["properties"]["depth"] == {
        "type": "number",
        "description": "Maximum depth to traverse the node tree (1-4 recommended)",
        "minimum": 1,
        "multipleOf": 1,
    }

    nodes = TOOLS_BY_NAME["get_file_nodes"].tool.inputSchema
    assert nodes["required"] == ["file_key", "ids"]
    assert nodes["properties"]["ids"]["items"] == {"type": "string"}

    list_files = TOOLS_BY_NAME["list_files"].tool.inputSchema
    assert "required" not in list_files
    assert set(list_files["properties"]) == {"project_id", "team_id"}


def test_only_file_info_guards_size():
    assert [d.name for d in CATALOG if d.guard_size] == ["get_file_info"]


@pytest.mark.parametrize("name", FILE_KEY_TOOLS)
def test_missing_file_key(name):
    assert _invalid_message(name, {"ids": ["1:2"]}) == "file_key is required"


@pytest.mark.parametrize("name", FILE_KEY_TOOLS)
def test_empty_file_key(name):
    assert _invalid_message(name, {"file_key": "", "ids": ["1:2"]}) == "file_key is required"


@pytest.mark.parametrize("ids", [None, [], "1:2"])
def test_file_nodes_requires_non_empty_ids(ids):
    arguments = {"file_key": "file-1"}
    if ids is not None:
        arguments["ids"] = ids
    assert _invalid_message("get_file_nodes", arguments) == "ids array is required and must not be empty"


def test_file_nodes_rejects_non_string_ids():
    message = _invalid_message("get_file_nodes", {"file_key": "f", "ids": ["1:2", 3]})
    assert message == "ids must contain only string values"


def test_wrong_types():
    assert _invalid_message("get_file_info", {"file_key": 12}) == "file_key must be a string"
    assert _invalid_message("get_file_info", {"file_key": "f", "depth": "2"}) == "depth must be a number"
    assert _invalid_message("get_file_info", {"file_key": "f", "depth": True}) == "depth must be a number"


def test_depth_minimum():
    assert _invalid_message("get_file_info", {"file_key": "f", "depth": 0}) == "depth must be >= 1"


def test_arguments_must_be_object():
    assert _invalid_message("get_styles", ["file-1"]) == "arguments must be an object"


def test_records_are_built():
    assert validate_arguments(TOOLS_BY_NAME["get_styles"], {"file_key": "f"}) == FileKeyArgs(file_key="f")
    assert validate_arguments(
        TOOLS_BY_NAME["get_file_info"], {"file_key": "f", "depth": 2, "node_id": "1:2"}
    ) == FileInfoArgs(file_key="f", depth=2, node_id="1:2")
    assert validate_arguments(
        TOOLS_BY_NAME["get_file_nodes"], {"file_key": "f", "ids": ["b", "a"]}
    ) == FileNodesArgs(file_key="f", ids=("b", "a"))


def test_list_files_accepts_no_arguments():
    assert validate_arguments(TOOLS_BY_NAME["list_files"], None) == ListFilesArgs()
    assert validate_arguments(TOOLS_BY_NAME["list_files"], {}) == ListFilesArgs()


def test_undeclared_arguments_ignored():
    args = validate_arguments(TOOLS_BY_NAME["get_components"], {"file_key": "f", "verbose": True})
    assert args == FileKeyArgs(file_key="f")


@pytest.mark.parametrize("depth", [1.5, 2.25])
def test_depth_must_be_whole(depth):
    assert _invalid_message("get_file_info", {"file_key": "f", "depth": depth}) == "depth must be an integer"


def test_whole_float_depth_becomes_int():
    args = validate_arguments(TOOLS_BY_NAME["get_file_info"], {"file_key": "f", "depth": 3.0})
    assert args.depth == 3
    assert isinstance(args.depth, int)
