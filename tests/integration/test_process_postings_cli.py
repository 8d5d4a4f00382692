"""
Integration test for the process_postings script.
Tests: raw JSON file -> transformed JSON file, with per-record failure handling.
"""

import importlib.util
import json
from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf
from typer.testing import CliRunner

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "process_postings.py"

runner = CliRunner()


def _load_script():
    spec = importlib.util.spec_from_file_location("process_postings", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def script(tmp_path, monkeypatch):
    module = _load_script()
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    yield module
    # setup_logger attached sinks to the runner's stdout
    logger.remove()


@pytest.fixture
def raw_fixture():
    yaml_data = OmegaConf.load(FIXTURES_PATH / "raw_postings.yaml")
    return OmegaConf.to_container(yaml_data, resolve=True)


def _write_input(path: Path, postings: list) -> Path:
    path.write_text(json.dumps(postings, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.mark.integration
def test_default_output_path(script):
    assert script.default_output_path(Path("data/raw-data.json")) == Path(
        "data/processed-data.json"
    )
    assert script.default_output_path(Path("data/postings.json")) == Path(
        "data/postings.processed.json"
    )


@pytest.mark.integration
def test_process_clean_batch(script, raw_fixture, tmp_path):
    input_path = _write_input(tmp_path / "raw-data.json", raw_fixture["postings"])

    result = runner.invoke(script.app, [str(input_path), "--quiet"])

    assert result.exit_code == 0
    output_path = tmp_path / "processed-data.json"
    records = json.loads(output_path.read_text(encoding="utf-8"))
    assert [record["id"] for record in records] == [1024, 2051, 3307]
    assert records[0]["majors"][0] == "데이터사이언스학부"

    log_files = list((tmp_path / "logs").glob("process_*/transform.log"))
    assert len(log_files) == 1


@pytest.mark.integration
def test_failed_records_are_skipped(script, raw_fixture, tmp_path):
    """Malformed records are left out and the run exits non-zero."""
    postings = raw_fixture["postings"] + raw_fixture["malformed"]
    input_path = _write_input(tmp_path / "raw-data.json", postings)
    output_path = tmp_path / "out" / "records.json"

    result = runner.invoke(script.app, [str(input_path), "-o", str(output_path), "-q"])

    assert result.exit_code == 1
    records = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(records) == 3


@pytest.mark.integration
def test_strict_aborts_without_output(script, raw_fixture, tmp_path):
    postings = raw_fixture["malformed"] + raw_fixture["postings"]
    input_path = _write_input(tmp_path / "raw-data.json", postings)
    output_path = tmp_path / "records.json"

    result = runner.invoke(script.app, [str(input_path), "-o", str(output_path), "--strict", "-q"])

    assert result.exit_code == 1
    assert not output_path.exists()


@pytest.mark.integration
def test_rejects_non_object_postings(script, raw_fixture, tmp_path):
    """A stray non-object element stops the run before any output is written."""
    postings = raw_fixture["postings"] + ["잘못된 행"]
    input_path = _write_input(tmp_path / "raw-data.json", postings)

    result = runner.invoke(script.app, [str(input_path), "-q"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, AttributeError)
    assert not (tmp_path / "processed-data.json").exists()


@pytest.mark.integration
def test_rejects_non_list_input(script, tmp_path):
    input_path = tmp_path / "raw-data.json"
    input_path.write_text('{"id": "1"}', encoding="utf-8")

    result = runner.invoke(script.app, [str(input_path), "-q"])

    assert result.exit_code == 1
    assert not (tmp_path / "processed-data.json").exists()
