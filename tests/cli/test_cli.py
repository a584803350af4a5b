"""Tests for the sequencer command-line interface."""

import json
import logging

import pytest

from sequencer.cli import build_parser, main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("sequencer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_help_without_command(capsys):
    assert main([]) == 0
    assert "Greedy overlap assembly" in capsys.readouterr().out


def test_parser_lists_subcommands():
    help_text = build_parser().format_help()
    assert "assemble" in help_text
    assert "demo" in help_text


def test_assemble_fragments_from_arguments(capsys):
    assert main(["assemble", "CAA", "AAG"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["CAAG", "state: done (1 fragment(s))"]


def test_assemble_reports_stalled_remainder(capsys):
    assert main(["assemble", "GGG", "TTT"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["GGG", "TTT", "state: stalled (2 fragment(s))"]


def test_assemble_rejects_invalid_alphabet(capsys):
    assert main(["assemble", "GCATX"]) == 2
    assert "invalid symbols" in capsys.readouterr().err


def test_assemble_requires_fragments():
    assert main(["assemble"]) == 2


def test_assemble_from_input_file_with_json_output(tmp_path, capsys):
    reads = tmp_path / "reads.fa"
    reads.write_text(">r1\nCAA\n>r2\nAAG\n", encoding="utf-8")
    output = tmp_path / "asm.json"

    assert main(["assemble", "--input", str(reads), "--output", str(output)]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["state"] == "done"
    assert payload["fragments"] == ["CAAG"]
    assert "CAAG" in capsys.readouterr().out


def test_assemble_csv_output(tmp_path):
    output = tmp_path / "asm.csv"
    assert main(["assemble", "GGG", "TTT", "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8").splitlines()[0] == "index,length,fragment"


def test_config_file_and_flag_override(tmp_path, capsys):
    config = tmp_path / "asm.yaml"
    config.write_text("tie_break: shortest\n", encoding="utf-8")

    assert main(["assemble", "--config", str(config), "--max-merges", "1", "ACG", "CGTTTT", "CGA"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["CGTTTT", "ACGA", "state: running (2 fragment(s))"]


def test_invalid_config_value_exits_with_error(tmp_path):
    config = tmp_path / "asm.json"
    config.write_text(json.dumps({"min_overlap": 0}), encoding="utf-8")
    assert main(["assemble", "--config", str(config), "CAA"]) == 2


def test_demo(capsys):
    assert main(["demo"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["5"] * 5 + ["GCATT", "state: done (1 fragment(s))", "done"]


@pytest.mark.parametrize(
    "argv",
    [
        ["assemble", "CAA", "AAG", "-v"],
        ["assemble", "-v", "CAA", "AAG"],
        ["-v", "assemble", "CAA", "AAG"],
    ],
)
def test_verbose_flag_accepted_before_or_after_subcommand(argv, capsys):
    assert main(argv) == 0

    assert logging.getLogger("sequencer").level == logging.DEBUG
    assert "CAAG" in capsys.readouterr().out


def test_default_verbosity_is_info():
    assert main(["assemble", "CAA", "AAG"]) == 0
    assert logging.getLogger("sequencer").level == logging.INFO


def test_demo_accepts_verbose_flag():
    assert main(["demo", "-v"]) == 0
    assert logging.getLogger("sequencer").level == logging.DEBUG


@pytest.mark.parametrize(
    "config_text",
    [
        "min_overlap: '2'\n",
        "tie_break: [first]\n",
        "max_merges: true\n",
    ],
)
def test_mistyped_config_value_exits_with_error(tmp_path, capsys, config_text):
    config = tmp_path / "asm.yaml"
    config.write_text(config_text, encoding="utf-8")

    assert main(["assemble", "--config", str(config), "CAA", "AAG"]) == 2
    assert "invalid type" in capsys.readouterr().err


def test_directory_input_exits_with_error(tmp_path):
    assert main(["assemble", "--input", str(tmp_path)]) == 2
