from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from shapekit import __version__, cli


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAPEKIT_HOME", str(tmp_path / "home"))


def test_parse_args() -> None:
    args = cli.parse_args(
        ["--sequence", "1, 2,?,3", "--pyramid", "1,2;3", "--size", "200x100"]
    )
    assert args.sequence == ["1", "2", "?", "3"]
    assert args.pyramid == [["1", "2"], ["3"]]
    assert args.size == (200, 100)
    assert args.out == Path("shapekit.png")


def test_parse_args_bad_size() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["--size", "big"])


@pytest.mark.parametrize(
    "argv",
    [
        ["--size", "0x0"],
        ["--size", "-5x10"],
        ["--radius", "-1"],
        ["--radius", "0"],
        ["--radius", "nan"],
        ["--radius", "inf"],
        ["--radius", "wide"],
    ],
)
def test_parse_args_rejects_non_positive(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(argv)
    assert exc.value.code == 2
    assert argv[0] in capsys.readouterr().err


def test_run_pillow(tmp_path: Path) -> None:
    out = tmp_path / "out.png"
    args = cli.parse_args(
        [
            "--sequence",
            "1,2,?,3",
            "--pyramid",
            "1,2,3;4,5;6",
            "--radius",
            "12",
            "--size",
            "240x160",
            "--out",
            str(out),
        ]
    )
    assert cli.run(args) == out
    with Image.open(out) as img:
        assert img.size == (240, 160)


def test_run_pygame(tmp_path: Path) -> None:
    out = tmp_path / "pg.png"
    args = cli.parse_args(
        ["--backend", "pygame", "--sequence", "?", "--out", str(out)]
    )
    cli.run(args)
    assert out.exists()


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--version"])
    assert __version__ in capsys.readouterr().out
