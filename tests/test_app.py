import pytest

from blockmenu.app import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.assets == "assets"
    assert args.seed is None


def test_parser_reads_options():
    args = build_parser().parse_args(["--assets", "data", "--seed", "7"])
    assert args.assets == "data"
    assert args.seed == 7


def test_parser_rejects_bad_seed():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--seed", "abc"])


def test_main_reports_missing_assets(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    status = main(["--assets", str(tmp_path / "missing")])
    assert status == 1
    assert "cannot load asset" in capsys.readouterr().err