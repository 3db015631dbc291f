"""Tests for the sequence dump command."""

import pytest

from py_rand import cli
from py_rand.core.lcg_random import LCGRandom


class TestGenerate:
    """Test value formatting."""

    def test_ints(self):
        """Test the first ints of seed zero."""
        assert cli.generate(0, 2) == ["0", "4232237"]

    def test_bounded_ints(self):
        """Test that --max limits values."""
        values = [int(v) for v in cli.generate(42, 100, "int", max_value=10)]
        assert all(0 <= v < 10 for v in values)

    def test_bytes(self):
        """Test that byte lines are hex of the buffer fill."""
        lines = cli.generate(5, 2, "bytes", width=16)
        ref = LCGRandom(5)

        assert lines == [ref.next_bytes(16).hex(), ref.next_bytes(16).hex()]

    def test_bools(self):
        """Test boolean formatting."""
        assert set(cli.generate(7, 50, "bool")) == {"true", "false"}


class TestMain:
    """Test the command entry point."""

    def test_prints_values(self, capsys):
        """Test that main prints one value per line."""
        cli.main(["--seed", "0", "--count", "2"])
        assert capsys.readouterr().out == "0\n4232237\n"

    def test_hex_seed(self, capsys):
        """Test that hex seeds are accepted."""
        cli.main(["--seed", "0x2a", "--count", "3", "--kind", "double"])
        out = capsys.readouterr().out.split()

        assert out == cli.generate(42, 3, "double")

    def test_invalid_max(self, capsys):
        """Test that a non-positive bound exits with usage error."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--seed", "1", "--max", "0"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("kind", ["int64", "float", "double", "bool", "bytes"])
    def test_max_rejected_for_other_kinds(self, kind, capsys):
        """Test that --max is refused unless drawing ints."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--seed", "1", "--kind", kind, "--max", "10"])

        assert exc_info.value.code == 2
        assert "--max only applies to --kind int" in capsys.readouterr().err

    def test_max_with_int_kind(self, capsys):
        """Test that --max is honoured for ints."""
        cli.main(["--seed", "42", "--count", "20", "--kind", "int", "--max", "10"])
        values = [int(v) for v in capsys.readouterr().out.split()]

        assert len(values) == 20
        assert all(0 <= v < 10 for v in values)

    def test_missing_seed(self, capsys):
        """Test that the seed is required."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 2
