"""
Unit tests for players_csv module.
Tests: export_players, parse_players
"""
import io

import pytest

from gateway.exceptions import ImportFailed
from gateway.models import PlayerRecord
from gateway.players_csv import export_players, parse_players


class TestExportPlayers:
    """Tests for export_players function."""

    def test_single_player(self):
        records = [PlayerRecord("player@provider.com", "player", "http://localhost", 0)]
        assert export_players(records) == '"player@provider.com","player","http://localhost",0'

    def test_no_players(self):
        assert export_players([]) == ''

    def test_one_line_per_player_without_trailing_newline(self):
        records = [
            PlayerRecord("a@provider.com", "a", "http://a", 12),
            PlayerRecord("b@provider.com", "b", "http://b", -3),
        ]
        assert export_players(records) == (
            '"a@provider.com","a","http://a",12\n'
            '"b@provider.com","b","http://b",-3'
        )

    def test_embedded_quotes_are_doubled(self):
        records = [PlayerRecord("q@provider.com", 'the "best"', "http://q", 1)]
        assert export_players(records) == '"q@provider.com","the ""best""","http://q",1'


class TestParsePlayers:
    """Tests for parse_players function."""

    def test_parses_exported_format(self):
        stream = io.BytesIO(b'"player@provider.com","player","http://localhost",-2')
        assert parse_players(stream) == [
            PlayerRecord("player@provider.com", "player", "http://localhost", -2)
        ]

    def test_skips_blank_lines(self):
        stream = io.BytesIO(b'"a@p.com","a","http://a",1\n\n"b@p.com","b","http://b",2\n')
        assert [r.email for r in parse_players(stream)] == ["a@p.com", "b@p.com"]

    def test_wrong_field_count(self):
        with pytest.raises(ImportFailed) as exc_info:
            parse_players(io.BytesIO(b'"a@p.com","a"'))
        assert exc_info.value.details == {'line': 1}

    def test_non_integer_score(self):
        with pytest.raises(ImportFailed):
            parse_players(io.BytesIO(b'"a@p.com","a","http://a",lots'))

    def test_undecodable_bytes(self):
        with pytest.raises(ImportFailed):
            parse_players(io.BytesIO(b'\xff\xfe\xfa'))

    def test_stream_failure(self, mocker):
        stream = mocker.MagicMock()
        stream.read.side_effect = OSError("connection reset")
        with pytest.raises(ImportFailed) as exc_info:
            parse_players(stream)
        assert "connection reset" in str(exc_info.value)
