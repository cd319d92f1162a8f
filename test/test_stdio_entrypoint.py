"""End-to-end tests running the server as a subprocess over stdio."""

import json
import os
import subprocess
import sys


def _env(**overrides):
    env = {key: value for key, value in os.environ.items() if not key.startswith("LAYOUT_MCP_")}
    env.update(overrides)
    return env


def _run(lines, *args, **env_overrides):
    return subprocess.run(
        [sys.executable, "-m", "layout_mcp.main_mcp", "--bridge", "dry-run", *args],
        input="".join(lines).encode("utf-8"),
        capture_output=True,
        env=_env(**env_overrides),
        timeout=60,
    )


def _request(request_id, method, params=None):
    message = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        message["params"] = params
    return json.dumps(message) + "\n"


def _responses(completed):
    return [json.loads(line) for line in completed.stdout.decode("utf-8").splitlines()]


def test_session_over_stdio():
    completed = _run(
        [
            _request(1, "initialize", {"protocolVersion": "2024-11-05", "capabilities": {}}),
            json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}) + "\n",
            _request(2, "tools/list"),
            _request(3, "tools/call", {"name": "create_document", "arguments": {"name": "Brochure"}}),
            _request(4, "tools/call", {"name": "get_session_info"}),
        ]
    )

    assert completed.returncode == 0
    responses = _responses(completed)
    assert [response["id"] for response in responses] == [1, 2, 3, 4]
    assert responses[0]["result"]["serverInfo"]["name"] == "layout-mcp"
    assert len(responses[1]["result"]["tools"]) == 22

    created = json.loads(responses[2]["result"]["content"][0]["text"])
    assert created["success"] is True
    assert created["result"]["document"]["name"] == "Brochure"

    info = json.loads(responses[3]["result"]["content"][0]["text"])
    assert info["result"]["hasActiveDocument"] is True


def test_malformed_frame_does_not_stop_the_server():
    completed = _run(["{not json\n", _request(7, "ping")])

    assert completed.returncode == 0
    fault, pong = _responses(completed)
    assert fault["id"] is None
    assert fault["error"]["code"] == -32700
    assert pong == {"jsonrpc": "2.0", "id": 7, "result": {}}


def test_logs_go_to_stderr_only():
    completed = _run([_request(1, "ping")], "--log-level", "debug")

    assert completed.returncode == 0
    assert _responses(completed) == [{"jsonrpc": "2.0", "id": 1, "result": {}}]
    assert b"Starting MCP server" in completed.stderr


def test_invalid_environment_exits_non_zero():
    completed = subprocess.run(
        [sys.executable, "-m", "layout_mcp.main_mcp"],
        input=b"",
        capture_output=True,
        env=_env(LAYOUT_MCP_IDLE_TIMEOUT="never"),
        timeout=60,
    )

    assert completed.returncode == 1
    assert completed.stdout == b""
    assert b"Invalid configuration" in completed.stderr
