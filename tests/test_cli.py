import json
from pathlib import Path

import pytest

from varna.cli import main


@pytest.fixture(autouse=True)
def _dev_env(monkeypatch) -> None:
    monkeypatch.delenv("VARNA_ENV", raising=False)
    monkeypatch.delenv("VARNA_STRICT_VALIDATION", raising=False)


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: varna" in captured.out


def test_cli_detect(capsys) -> None:
    exit_code = main(["detect", "राम"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["script"] == "devanagari"


def test_cli_validate_reports_failure(capsys) -> None:
    exit_code = main(["validate", "रामa"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["error_type"] == "mixed_script"


def test_cli_normalize(capsys) -> None:
    assert main(["normalize", "राम"]) == 0
    assert json.loads(capsys.readouterr().out)["normalized"] == "rāma"

    assert main(["normalize", "rāma", "--to", "devanagari"]) == 0
    assert json.loads(capsys.readouterr().out)["normalized"] == "राम"


def test_cli_tokenize(capsys) -> None:
    exit_code = main(["tokenize", "bhakti"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert [item["grapheme"] for item in payload] == ["bh", "a", "k", "t", "i"]


def test_cli_classify_and_homorganic(capsys) -> None:
    assert main(["classify", "त"]) == 0
    assert json.loads(capsys.readouterr().out)["articulation_place"] == "dental"

    assert main(["homorganic", "क", "ख"]) == 0
    assert json.loads(capsys.readouterr().out)["applies"] is True


def test_cli_analyze_returns_json(capsys) -> None:
    exit_code = main(["analyze", "राम"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["normalized"] == "rāma"
    assert payload["vowel_count"] == 2


def test_cli_analyze_strict_failure(capsys) -> None:
    exit_code = main(["analyze", "रामa", "--strict"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid word" in captured.err


def test_cli_analyze_writes_json_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "analysis.json"
    exit_code = main(["analyze", "rāma", "--raw", "-o", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["word"] == "rāma"
    assert "Wrote analysis JSON" in captured.out


def test_cli_pratyahara(capsys) -> None:
    assert main(["pratyahara", "ik", "--script", "devanagari"]) == 0
    assert json.loads(capsys.readouterr().out)["phonemes"] == ["इ", "उ", "ऋ", "ऌ"]

    assert main(["pratyahara", "xyz"]) == 1
    assert "Unknown pratyahara" in capsys.readouterr().err
