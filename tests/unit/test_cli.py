import json

import pytest

from config.settings import get_settings
from src.cli import main


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("EDM_DEFAULT_MAX_DEPTH", raising=False)
    monkeypatch.delenv("EDM_JSON_INDENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_paths_command_prints_json(metadata_file, capsys) -> None:
    exit_code = main(["paths", str(metadata_file), "Customer", "Product", "--max-depth", "3"])

    assert exit_code == 0
    paths = json.loads(capsys.readouterr().out)
    assert len(paths) == 3
    assert [edge["navigation_property"] for edge in paths[0]["edges"]] == [
        "Orders",
        "Lines",
        "Product",
    ]


def test_paths_command_uses_configured_depth(metadata_file, capsys, monkeypatch) -> None:
    monkeypatch.setenv("EDM_DEFAULT_MAX_DEPTH", "2")
    get_settings.cache_clear()

    assert main(["paths", str(metadata_file), "Customer", "Product"]) == 0
    assert json.loads(capsys.readouterr().out) == []


def test_paths_command_rejects_negative_depth(metadata_file, capsys) -> None:
    exit_code = main(["paths", str(metadata_file), "A", "B", "--max-depth", "-1"])

    assert exit_code == 2
    assert "[!]" in capsys.readouterr().err


def test_missing_file_is_a_validation_error(tmp_path, capsys) -> None:
    assert main(["relationships", str(tmp_path / "missing.edmx")]) == 2


def test_relationships_command_mermaid(metadata_file, capsys) -> None:
    assert main(["relationships", str(metadata_file), "--format", "mermaid"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("graph TD")
    assert "Customer -->|Orders| Order" in out


def test_entities_command_filters(metadata_file, capsys) -> None:
    assert main(["entities", str(metadata_file), "--name", "order"]) == 0

    entities = json.loads(capsys.readouterr().out)
    assert [entity["name"] for entity in entities] == ["Order"]


def test_graph_command_runs_plugin(metadata_file, capsys) -> None:
    assert main(["graph", str(metadata_file)]) == 0

    result = json.loads(capsys.readouterr().out)
    assert len(result["nodes"]) == 5
    assert result["external_refs"] == ["Region"]


def test_output_option_writes_file(metadata_file, tmp_path) -> None:
    output = tmp_path / "relationships.json"

    assert main(["--output", str(output), "relationships", str(metadata_file)]) == 0

    assert len(json.loads(output.read_text(encoding="utf-8"))) == 7


def test_malformed_document_exits_with_error(tmp_path, capsys) -> None:
    path = tmp_path / "broken.edmx"
    path.write_text("<Schema>", encoding="utf-8")

    assert main(["relationships", str(path)]) == 1
    assert "Failed to load" in capsys.readouterr().err


def test_graph_command_honours_xml_encoding_declaration(tmp_path, capsys) -> None:
    path = tmp_path / "latin1.edmx"
    path.write_bytes(
        (
            '<?xml version="1.0" encoding="latin-1"?>'
            '<Schema xmlns="http://docs.oasis-open.org/odata/ns/edm">'
            '<EntityType Name="Caf\xe9"/>'
            "</Schema>"
        ).encode("latin-1")
    )

    assert main(["graph", str(path)]) == 0

    result = json.loads(capsys.readouterr().out)
    assert [node["name"] for node in result["nodes"]] == ["Caf\xe9"]
    assert result["entity_count"] == 1


def test_graph_command_rejects_unsupported_extension(tmp_path, capsys) -> None:
    path = tmp_path / "metadata.json"
    path.write_text("{}", encoding="utf-8")

    assert main(["graph", str(path)]) == 2
    assert "Unsupported metadata file extension" in capsys.readouterr().err


def test_invalid_settings_are_a_configuration_error(metadata_file, capsys, monkeypatch) -> None:
    monkeypatch.setenv("EDM_JSON_INDENT", "-1")
    get_settings.cache_clear()

    assert main(["relationships", str(metadata_file)]) == 1
    assert "Invalid configuration" in capsys.readouterr().err
