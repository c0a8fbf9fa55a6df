"""Tests for command line argument parsing."""

import pytest

from identicons_svg.cli import parse_args


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        """Test everything is unset by default."""
        args = parse_args([])

        assert args.hash is None
        assert args.size is None
        assert args.width is None
        assert args.color is None
        assert args.count == 1
        assert args.no_background is False
        assert args.show is False
        assert args.serve is False

    def test_render_options(self):
        """Test short flags map to options."""
        args = parse_args(["abcd", "-s", "5", "-w", "256", "-c", "#ff0000"])

        assert args.hash == "abcd"
        assert args.size == 5
        assert args.width == 256
        assert args.color == "#ff0000"

    def test_background_options(self):
        """Test background flags."""
        args = parse_args(["--background", "white", "--radius", "8", "--no-background"])

        assert args.background == "white"
        assert args.radius == 8
        assert args.no_background is True

    @pytest.mark.parametrize(
        "argv",
        [["-s", "0"], ["-w", "-1"], ["-n", "0"], ["--radius", "-2"], ["-s", "five"]],
    )
    def test_rejects_invalid_numbers(self, argv):
        """Test non-positive or non-numeric values exit with usage error."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(argv)
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out
