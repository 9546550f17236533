from __future__ import annotations

from pathlib import Path

import pytest

from transmake.blend_style import BlendStyle, resolve_blend_style
from transmake.cli import build_config, main, parse_cli_args
from transmake.errors import MissingArgumentError
from transmake.tables import generate_table


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "-palette" in capsys.readouterr().err


def test_missing_palette_argument(capsys):
    assert main(["-outprefix", "X"]) == 1
    err = capsys.readouterr().err
    assert "[error] Palette file not specified" in err


def test_unreadable_palette(tmp_path: Path, capsys):
    assert main(["-palette", str(tmp_path / "nope.pal")]) == 1
    assert "[error]" in capsys.readouterr().err


def test_undersized_palette(tmp_path: Path, capsys):
    path = tmp_path / "short.pal"
    path.write_bytes(b"\x01" * 10)
    assert main(["-palette", str(path)]) == 1
    assert "need at least 768" in capsys.readouterr().err


def test_unwritable_output(tmp_path: Path, palette_file: Path, capsys):
    prefix = str(tmp_path / "no_such_dir" / "T")
    assert main(["-palette", str(palette_file), "-outfiles", "1", "-outprefix", prefix]) == 1
    assert "could not write" in capsys.readouterr().err


def test_end_to_end_writes_requested_levels(tmp_path: Path, palette_file: Path, random_palette, capsys):
    prefix = str(tmp_path / "ST")
    status = main(
        [
            "-PALETTE", str(palette_file),
            "-outfiles", "2x2",
            "-outprefix", prefix,
            "-BlendStyle", "ADD",
            "stray",
            "-unknown",
        ]
    )
    assert status == 0
    written = sorted(p.name for p in tmp_path.glob("ST*"))
    assert written == ["ST20.lmp"]
    expected = generate_table(random_palette, BlendStyle.ADD, 2).tobytes()
    assert (tmp_path / "ST20.lmp").read_bytes() == expected
    out = capsys.readouterr().out
    assert "Style: add" in out
    assert "Done!" in out


def test_no_digits_writes_nothing(tmp_path: Path, palette_file: Path, capsys):
    prefix = str(tmp_path / "N")
    assert main(["-palette", str(palette_file), "-outfiles", "abc", "-outprefix", prefix]) == 0
    assert list(tmp_path.glob("N*")) == []
    assert "[warn]" in capsys.readouterr().out


def test_defaults(palette_file: Path):
    config = build_config(parse_cli_args(["-palette", str(palette_file)]))
    assert config.style is BlendStyle.TRANSLUCENT
    assert config.prefix == "TRANS"
    assert config.levels == tuple(range(1, 10))
    assert config.preview is False


def test_empty_outfiles_keeps_default(palette_file: Path):
    config = build_config(parse_cli_args(["-palette", str(palette_file), "-outfiles", ""]))
    assert config.levels == tuple(range(1, 10))


def test_unknown_style_keeps_previous(palette_file: Path):
    args = parse_cli_args(
        ["-palette", str(palette_file), "-blendstyle", "modulate", "-blendstyle", "glow"]
    )
    assert build_config(args).style is BlendStyle.MODULATE


def test_unknown_style_alone_keeps_default(palette_file: Path, capsys):
    args = parse_cli_args(["-palette", str(palette_file), "-blendstyle", "glow", "-debug"])
    assert build_config(args).style is BlendStyle.TRANSLUCENT
    assert "unknown blend style 'glow'" in capsys.readouterr().out


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Translucent", BlendStyle.TRANSLUCENT),
        ("ADD", BlendStyle.ADD),
        ("subtract", BlendStyle.SUBTRACT),
        ("ReverseSubtract", BlendStyle.REVERSESUBTRACT),
        ("modulate", BlendStyle.MODULATE),
        ("bogus", BlendStyle.SUBTRACT),
        (None, BlendStyle.SUBTRACT),
    ],
)
def test_resolve_blend_style(name, expected):
    assert resolve_blend_style(name, BlendStyle.SUBTRACT) is expected


def test_build_config_requires_palette():
    with pytest.raises(MissingArgumentError):
        build_config(parse_cli_args(["-outfiles", "1"]))


def test_values_may_start_with_dash(tmp_path: Path, random_palette, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-pal.lmp").write_bytes(random_palette.rgb.tobytes())
    status = main(["-palette", "-pal.lmp", "-outfiles", "1", "-outprefix", "-fx"])
    assert status == 0
    out = tmp_path / "-fx10.lmp"
    assert out.stat().st_size == 65536
    expected = generate_table(random_palette, BlendStyle.TRANSLUCENT, 1).tobytes()
    assert out.read_bytes() == expected


def test_unknown_option_does_not_take_a_value(palette_file: Path):
    args = parse_cli_args(["-x", "-palette", str(palette_file), "-outfiles", "3"])
    assert args.palette == str(palette_file)
    assert args.outfiles == "3"
    assert args.ignored == ["-x"]


def test_trailing_option_without_value_is_a_usage_error():
    with pytest.raises(SystemExit) as info:
        parse_cli_args(["-palette"])
    assert info.value.code == 2
