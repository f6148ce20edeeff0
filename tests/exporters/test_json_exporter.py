# tests/exporters/test_json_exporter.py
import json

import pytest

from kubefree.core.calculator import rollup
from kubefree.core.exceptions import ConfigurationError
from kubefree.core.rows import build_container_rows
from kubefree.exporters import CSVExporter, JSONExporter, get_exporter


@pytest.mark.asyncio
async def test_json_exporter_empty_data(tmp_path):
    exporter = JSONExporter()
    out = tmp_path / "kubefree-report.json"
    await exporter.export([], str(out))
    assert out.exists()
    assert json.loads(out.read_text(encoding="utf-8")) == []


@pytest.mark.asyncio
async def test_json_exporter_node_records(tmp_path, node, web_pod, snapshot):
    exporter = JSONExporter()
    out = tmp_path / "nested" / "report.json"
    written = await exporter.export([rollup(node, [web_pod], snapshot.node("node-1")).to_record()], str(out))

    assert written == str(out)
    content = json.loads(out.read_text(encoding="utf-8"))
    assert content[0]["name"] == "node-1"
    assert content[0]["cpu_use"] == 58
    assert content[0]["cpu_req_percent"] == 19
    assert content[0]["mem_alloc"] == 5943857000


@pytest.mark.asyncio
async def test_json_exporter_keeps_missing_values_as_null(tmp_path, node, web_pod):
    out = tmp_path / "report.json"
    await JSONExporter().export([rollup(node, [web_pod], None).to_record()], str(out))
    content = json.loads(out.read_text(encoding="utf-8"))
    assert content[0]["cpu_use"] is None
    assert content[0]["cpu_use_percent"] is None


@pytest.mark.asyncio
async def test_json_exporter_accepts_models(tmp_path, web_pod, snapshot, now):
    rows = build_container_rows("node-1", [web_pod], snapshot, now=now)
    out = tmp_path / "rows.json"
    await JSONExporter().export(rows, str(out))
    content = json.loads(out.read_text(encoding="utf-8"))
    assert content[0]["container"] == "nginx"
    assert content[0]["mem_use"] == 2144333000


def test_get_exporter_by_format():
    assert isinstance(get_exporter("json"), JSONExporter)
    assert isinstance(get_exporter("CSV"), CSVExporter)
    with pytest.raises(ConfigurationError):
        get_exporter("xml")
