"""Tests for cli module."""

import io
import logging
import sys
from unittest import mock

import pytest

from treeviz import cli


class TestRun:
    def test_renders_stdin(self):
        out = io.StringIO()
        status = cli.run(io.BytesIO(b"A\n\tB\nC\n"), out)
        assert status == cli.EXIT_SUCCESS
        assert out.getvalue() == ".\n├─ A\n│  └─ B\n└─ C\n"

    def test_empty_input(self):
        out = io.StringIO()
        assert cli.run(io.BytesIO(b""), out) == cli.EXIT_SUCCESS
        assert out.getvalue() == ".\n"

    def test_utf8_labels(self):
        out = io.StringIO()
        cli.run(io.BytesIO("árbol\n\tnœud\n".encode("utf-8")), out)
        assert out.getvalue() == ".\n└─ árbol\n   └─ nœud\n"

    def test_undecodable_bytes_accepted(self):
        out = io.StringIO()
        assert cli.run(io.BytesIO(b"A\xff\n"), out) == cli.EXIT_SUCCESS
        assert out.getvalue() == ".\n└─ A�\n"

    def test_read_error_fails(self, caplog):
        source = mock.MagicMock()
        source.read.side_effect = OSError("broken pipe")
        out = io.StringIO()
        with caplog.at_level(logging.ERROR, logger="treeviz.cli"):
            status = cli.run(source, out)
        assert status == cli.EXIT_FAILURE
        assert out.getvalue() == ""
        assert "error reading input" in caplog.text

    def test_memory_error_fails(self, caplog):
        out = io.StringIO()
        with mock.patch.object(cli, "tree_from_text", side_effect=MemoryError):
            with caplog.at_level(logging.ERROR, logger="treeviz.cli"):
                status = cli.run(io.BytesIO(b"A\n"), out)
        assert status == cli.EXIT_FAILURE
        assert "memory allocation failed" in caplog.text

    def test_deep_nesting_succeeds(self, caplog):
        depth = 1200
        data = "".join("\t" * i + f"n{i}\n" for i in range(depth)).encode()
        out = io.StringIO()
        with caplog.at_level(logging.ERROR, logger="treeviz.cli"):
            status = cli.run(io.BytesIO(data), out)
        assert status == cli.EXIT_SUCCESS
        assert caplog.text == ""
        lines = out.getvalue().split("\n")
        assert len(lines) == depth + 2  # root, one per node, trailing ""
        assert lines[-2] == "   " * (depth - 1) + f"└─ n{depth - 1}"


class TestMain:
    def test_exits_zero_and_prints_tree(self, monkeypatch, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(b"A\nB\n"), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stdin)
        monkeypatch.setattr(sys, "argv", ["treeviz"])

        with pytest.raises(SystemExit) as exc:
            cli.main()

        assert exc.value.code == 0
        assert capsys.readouterr().out == ".\n├─ A\n└─ B\n"

    def test_exits_one_on_failure(self, monkeypatch):
        stdin = io.TextIOWrapper(io.BytesIO(b"A\n"), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stdin)

        with mock.patch.object(cli, "tree_from_text", side_effect=MemoryError):
            with pytest.raises(SystemExit) as exc:
                cli.main()

        assert exc.value.code == 1
