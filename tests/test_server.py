"""MCP registration and startup of the filesystem server."""

import asyncio
from unittest import mock

import pytest

from file_operations import file_system
from file_operations.tools import FileSystemTools

TOOL_NAMES = {
    "get_current_directory",
    "get_file_system_path",
    "list_directory_contents",
    "read_file_contents",
    "write_file_contents",
    "delete_file_or_directory",
    "create_directory",
    "move_file_or_directory",
    "copy_file",
    "create_symlink",
    "file_or_directory_exists",
    "get_file_or_directory_size",
    "get_file_or_directory_last_modified",
}


@pytest.fixture
def served(memory_fs, monkeypatch):
    monkeypatch.setattr(file_system, "_tools", FileSystemTools(memory_fs))
    return memory_fs


def test_all_tools_registered():
    tools = asyncio.run(file_system.mcp.list_tools())
    assert {tool.name for tool in tools} == TOOL_NAMES


def test_move_tool_schema_defaults_overwrite_to_false():
    tools = {tool.name: tool for tool in asyncio.run(file_system.mcp.list_tools())}
    schema = tools["move_file_or_directory"].inputSchema

    assert set(schema["required"]) == {"source_path", "destination_path"}
    assert schema["properties"]["overwrite"]["default"] is False


def test_list_tool_materializes_entries(served):
    served.create_directory("/data")
    served.write_text("/data/a.txt", "abc")

    result = file_system.list_directory_contents("/data")

    assert isinstance(result, list)
    assert [entry.name for entry in result] == ["a.txt"]


def test_tools_delegate_to_adapter(served):
    assert file_system.write_file_contents("/f.txt", "hi") is True
    assert file_system.read_file_contents("/f.txt") == "hi"
    assert file_system.get_file_or_directory_size("/f.txt") == 2
    assert file_system.copy_file("/f.txt", "/g.txt") is True
    assert file_system.move_file_or_directory("/g.txt", "/h.txt") is True
    assert file_system.create_symlink("/h.txt", "/link") is True
    assert file_system.file_or_directory_exists("/link") is True
    assert file_system.get_file_or_directory_last_modified("/missing") is None
    assert file_system.delete_file_or_directory("/h.txt") is True
    assert file_system.create_directory("/dir") is True
    assert file_system.get_current_directory() == "/"


def test_transport_from_environment(monkeypatch):
    monkeypatch.setenv("FILE_OPERATIONS_TRANSPORT", "SSE")
    assert file_system.get_transport() == "sse"


def test_unknown_transport_falls_back_to_stdio(monkeypatch, caplog):
    monkeypatch.setenv("FILE_OPERATIONS_TRANSPORT", "carrier-pigeon")
    assert file_system.get_transport() == "stdio"
    assert "Unknown transport 'carrier-pigeon'" in caplog.text


def test_default_transport(monkeypatch):
    monkeypatch.delenv("FILE_OPERATIONS_TRANSPORT", raising=False)
    assert file_system.get_transport() == "stdio"


def test_configure_logging_uses_environment_level(monkeypatch):
    monkeypatch.setenv("FILE_OPERATIONS_LOG_LEVEL", "debug")
    with mock.patch.object(file_system.logging, "basicConfig") as basic_config:
        file_system.configure_logging()
    assert basic_config.call_args.kwargs["level"] == 10


def test_configure_logging_rejects_unknown_level(monkeypatch, caplog):
    monkeypatch.setenv("FILE_OPERATIONS_LOG_LEVEL", "chatty")
    with mock.patch.object(file_system.logging, "basicConfig") as basic_config:
        file_system.configure_logging()
    assert basic_config.call_args.kwargs["level"] == "INFO"
    assert "Unknown log level 'CHATTY'" in caplog.text


def test_main_runs_configured_transport(monkeypatch, capsys):
    monkeypatch.setenv("FILE_OPERATIONS_TRANSPORT", "streamable-http")
    with mock.patch.object(file_system, "configure_logging"), \
            mock.patch.object(file_system.mcp, "run") as run:
        file_system.main()

    run.assert_called_once_with(transport="streamable-http")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "FileSystem MCP Server starting..." in captured.err
