# tests/cli/test_free_cli.py

import json
from unittest.mock import AsyncMock, MagicMock

from typer.testing import CliRunner

import kubefree.cli.free as free_mod
from kubefree.cli import app
from kubefree.core.calculator import rollup
from kubefree.core.exceptions import CollaboratorError
from kubefree.models.options import ByteUnit, UnitSystem
from kubefree.models.resources import Resource

runner = CliRunner()


def make_dummy_processor(return_items=None, error=None):
    proc = MagicMock()
    proc.run = AsyncMock(return_value=return_items or [], side_effect=error)
    proc.close = AsyncMock()
    return proc


def capture_options(monkeypatch, proc):
    captured = {}

    def fake_get_processor(options):
        captured["options"] = options
        return proc

    monkeypatch.setattr(free_mod, "get_processor", fake_get_processor)
    return captured


def test_free_prints_node_table(monkeypatch, node, web_pod, snapshot):
    proc = make_dummy_processor([rollup(node, [web_pod], snapshot.node("node-1"))])
    capture_options(monkeypatch, proc)

    result = runner.invoke(app, ["--no-color", "-k"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0].split() == [
        "NAME", "STATUS",
        "CPU/use", "CPU/req", "CPU/lim", "CPU/alloc", "CPU/use%", "CPU/req%", "CPU/lim%",
        "MEM/use", "MEM/req", "MEM/lim", "MEM/alloc", "MEM/use%", "MEM/req%", "MEM/lim%",
    ]  # fmt: skip
    assert lines[1].split() == [
        "node-1", "Ready", "58m", "704m", "304m", "3600m", "1%", "19%", "8%",
        "2144333K", "807403K", "375390K", "5943857K", "36%", "13%", "6%",
    ]  # fmt: skip
    proc.close.assert_awaited_once()


def test_free_builds_options_from_flags(monkeypatch):
    captured = capture_options(monkeypatch, make_dummy_processor())

    result = runner.invoke(
        app,
        [
            "node-1", "node-2", "-g", "-k", "-B", "--pod", "-n", "kube-system", "-l", "role=web",
            "--list", "--full-view", "--sort-by-resource", "CPU", "--no-headers",
        ],
    )  # fmt: skip

    assert result.exit_code == 0, result.output
    options = captured["options"]
    assert options.node_names == ("node-1", "node-2")
    assert options.byte_unit == ByteUnit.GIGA
    assert options.unit_system == UnitSystem.BINARY
    assert options.show_pods
    assert options.pod_namespace == "kube-system"
    assert options.label_selector == "role=web"
    assert options.list_containers
    assert not options.compact_view
    assert options.sort_by_resource == Resource.CPU


def test_no_all_namespaces_scopes_to_default(monkeypatch):
    captured = capture_options(monkeypatch, make_dummy_processor())
    result = runner.invoke(app, ["--no-all-namespaces"])
    assert result.exit_code == 0
    assert captured["options"].pod_namespace == "default"


def test_invalid_thresholds_exit_before_contacting_cluster(monkeypatch):
    captured = capture_options(monkeypatch, make_dummy_processor())

    result = runner.invoke(app, ["--warn-threshold", "95", "--crit-threshold", "90"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "options" not in captured


def test_invalid_sort_resource_exits(monkeypatch):
    capture_options(monkeypatch, make_dummy_processor())
    result = runner.invoke(app, ["--list", "--sort-by-resource", "disk"])
    assert result.exit_code == 1
    assert "can only sort by" in result.output


def test_invalid_output_format_exits(monkeypatch):
    capture_options(monkeypatch, make_dummy_processor())
    result = runner.invoke(app, ["--output", "xml"])
    assert result.exit_code == 1


def test_collaborator_error_exits_with_message(monkeypatch):
    proc = make_dummy_processor(error=CollaboratorError("node 'ghost' not found"))
    capture_options(monkeypatch, proc)

    result = runner.invoke(app, ["ghost"])

    assert result.exit_code == 1
    assert "node 'ghost' not found" in result.output
    proc.close.assert_awaited_once()


def test_export_json(monkeypatch, tmp_path, node, web_pod):
    capture_options(monkeypatch, make_dummy_processor([rollup(node, [web_pod], None)]))
    out = tmp_path / "out.json"

    result = runner.invoke(app, ["--output", "JSON", "--output-path", str(out)])

    assert result.exit_code == 0, result.output
    content = json.loads(out.read_text(encoding="utf-8"))
    assert content[0]["name"] == "node-1"
    assert content[0]["cpu_use"] is None
    assert "NAME" not in result.stdout


def test_version():
    from kubefree import __version__

    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"Version: {__version__}" in result.stdout


def test_environment_defaults_apply_when_flags_are_absent(monkeypatch):
    monkeypatch.setenv("KUBEFREE_WARN_THRESHOLD", "40")
    monkeypatch.setenv("KUBEFREE_CRIT_THRESHOLD", "70")
    monkeypatch.setenv("KUBEFREE_SORT_BY_RESOURCE", "cpu")
    captured = capture_options(monkeypatch, make_dummy_processor())

    result = runner.invoke(app, ["--crit-threshold", "80"])

    assert result.exit_code == 0, result.output
    options = captured["options"]
    assert options.warn_threshold == 40
    assert options.crit_threshold == 80
    assert options.sort_by_resource == Resource.CPU


def test_invalid_sort_resource_from_environment_exits(monkeypatch):
    monkeypatch.setenv("KUBEFREE_SORT_BY_RESOURCE", "disk")
    captured = capture_options(monkeypatch, make_dummy_processor())

    result = runner.invoke(app, ["--list"])

    assert result.exit_code == 1
    assert "can only sort by" in result.output
    assert "options" not in captured


def test_non_numeric_threshold_from_environment_exits(monkeypatch):
    monkeypatch.setenv("KUBEFREE_WARN_THRESHOLD", "abc")
    captured = capture_options(monkeypatch, make_dummy_processor())

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Error: KUBEFREE_WARN_THRESHOLD must be a number" in result.output
    assert "options" not in captured


def test_errors_are_reported_once(monkeypatch, caplog):
    capture_options(monkeypatch, make_dummy_processor(error=CollaboratorError("node 'ghost' not found")))

    result = runner.invoke(app, ["ghost"])

    assert result.exit_code == 1
    assert result.output.count("node 'ghost' not found") == 1
    assert not [r for r in caplog.records if r.levelname == "ERROR"]
