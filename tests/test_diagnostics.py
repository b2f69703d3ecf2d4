"""Tests for diagnostic output."""

import io
import logging

import pricemath
from pricemath.diagnostics import STATEMENT_MESSAGE, statement


class TestStatement:
    """Test statement function."""

    def test_prints_to_stdout(self, capsys):
        """Test default stream is stdout."""
        assert statement() is None
        captured = capsys.readouterr()
        assert captured.out == f"{STATEMENT_MESSAGE}\n"
        assert captured.err == ""

    def test_custom_stream(self, capsys):
        """Test message goes to the given stream only."""
        buf = io.StringIO()
        statement(buf)
        assert buf.getvalue() == "what\n"
        assert capsys.readouterr().out == ""

    def test_logs_at_debug(self, caplog):
        """Test a debug record is emitted on the diagnostics logger."""
        with caplog.at_level(logging.DEBUG, logger="pricemath.diagnostics"):
            statement(io.StringIO())
        assert any(r.name == "pricemath.diagnostics" for r in caplog.records)

    def test_exported_from_package(self):
        """Test statement is part of the public interface."""
        assert pricemath.statement is statement
