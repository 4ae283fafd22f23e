import json

import pytest

from twsizes.cli.main import main


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in ["TWSIZES_BASE_SPACING_PX", "TWSIZES_BREAKPOINTS", "TWSIZES_SPACING"]:
        monkeypatch.delenv(key, raising=False)


def test_infer_prints_sizes(capsys) -> None:
    code = main(["infer", "size-25 lg:size-30"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.strip() == "(min-width: 1024px) 120px, 100px"


def test_infer_joins_multiple_class_arguments(capsys) -> None:
    code = main(["infer", "w-full", "max-w-50"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "200px"


def test_infer_json_payload(capsys) -> None:
    code = main(["infer", "h-10", "--ratio", "2", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload == {"ok": True, "sizes": "80px", "fallback": "100vw"}


def test_infer_style_and_src_flags(capsys) -> None:
    assert main(["infer", "size-11", "--style", '{"width": 80}']) == 0
    assert capsys.readouterr().out.strip() == "80px"
    assert main(["infer", "h-10", "--src", '{"width": 1920, "height": 1080}']) == 0
    assert capsys.readouterr().out.strip() == "71.111px"


def test_infer_uninferable_exit_code(capsys) -> None:
    code = main(["infer", "w-full"])
    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "100vw" in captured.err


def test_infer_explain_lists_events(capsys) -> None:
    code = main(["infer", "h-10 aspect-video", "--explain"])
    out = capsys.readouterr().out
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "71.111px"
    assert "aspect ratio: 1.77778 (from class)" in lines
    assert "base: 71.111px" in lines
    assert any(line.startswith("[info] sizes inferred") for line in lines)


def test_infer_explain_json(capsys) -> None:
    code = main(["infer", "w-10", "lg:w-20", "--json", "--explain"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["explain"]["resolved"] == {"base": "40px", "lg": "80px"}


def test_infer_reads_project_config(tmp_path, capsys) -> None:
    (tmp_path / "twsizes.toml").write_text("[breakpoints]\nlg = 1200\n", encoding="utf-8")
    code = main(["infer", "w-10 lg:w-20", "--root", str(tmp_path)])
    assert code == 0
    assert capsys.readouterr().out.strip() == "(min-width: 1200px) 80px, 40px"


def test_infer_config_error_shows_caret(tmp_path, capsys) -> None:
    (tmp_path / "twsizes.toml").write_text("[breakpoints]\nlg = = 1\n", encoding="utf-8")
    code = main(["infer", "w-10", "--root", str(tmp_path)])
    err = capsys.readouterr().err
    assert code == 1
    assert "twsizes.toml is not valid TOML." in err
    assert "lg = = 1" in err
    assert "^" in err


def test_infer_without_classes_errors(capsys) -> None:
    code = main(["infer"])
    err = capsys.readouterr().err
    assert code == 1
    assert err.startswith("What happened: No classes given.")


def test_invalid_style_payload_errors(capsys) -> None:
    code = main(["infer", "w-10", "--style", "{"])
    err = capsys.readouterr().err
    assert code == 1
    assert "What happened: Invalid JSON for --style." in err


def test_invalid_ratio_errors_as_json(capsys) -> None:
    code = main(["infer", "h-10", "--ratio", "wide", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload == {"ok": False, "error": "--ratio must be a number. Pass a number after --ratio."}


def test_unknown_flag_errors(capsys) -> None:
    code = main(["infer", "w-10", "--fast"])
    assert code == 1
    assert "Unknown flag '--fast'." in capsys.readouterr().err


def test_length_command(capsys) -> None:
    assert main(["length", "1/2"]) == 0
    assert capsys.readouterr().out.strip() == "50%"
    assert main(["length", "auto"]) == 2
    assert capsys.readouterr().out.strip() == "'auto' does not resolve to a length."


def test_length_command_json(capsys) -> None:
    assert main(["length", "screen-md", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"ok": True, "value": "screen-md", "length": "768px"}


def test_version_and_help(capsys) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("twsizes ")
    assert main(["help"]) == 0
    assert "twsizes infer" in capsys.readouterr().out
    assert main([]) == 1


def test_unknown_command(capsys) -> None:
    assert main(["render", "x"]) == 1
    assert "Unknown command: 'render'." in capsys.readouterr().err


def test_version_falls_back_to_version_file(monkeypatch) -> None:
    from importlib import metadata

    from twsizes import version

    def _missing(name):
        raise metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version.metadata, "version", _missing)
    assert version.get_version() == version.VERSION_FILE.read_text(encoding="utf-8").strip()
