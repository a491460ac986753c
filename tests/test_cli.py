"""Tests for the keyforge-sheet command."""

import pytest
from click.testing import CliRunner
from PIL import Image

from conftest import DECK_ID
from decksheet.cli import cli


@pytest.fixture
def runner(monkeypatch, tmp_path, session):
    """CliRunner wired to the fake session, run from an empty directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DECKSHEET_DECK_URL", "https://decks.test/api/decks/{id}/?links=cards")
    monkeypatch.setattr("decksheet.client.requests.Session", lambda: session)
    return CliRunner()


class TestCli:
    """Tests for cli()."""

    def test_downloads_deck(self, runner, make_deck, tmp_path):
        make_deck(["a", "b", "c", "d"])

        result = runner.invoke(cli, [DECK_ID, "-o", "deck.png"])

        assert result.exit_code == 0, result.output
        assert "Connecting" in result.output
        assert "Building deck" in result.output
        assert "Saved deck sheet to deck.png" in result.output
        with Image.open(tmp_path / "deck.png") as sheet:
            assert sheet.size == (600, 840)

    def test_prompts_for_missing_arguments(self, runner, make_deck, tmp_path):
        make_deck(["a"])

        result = runner.invoke(cli, [], input=f"{DECK_ID}\nprompted.png\n")

        assert result.exit_code == 0, result.output
        assert "Enter a deck id: " in result.output
        assert "Save to image file: " in result.output
        assert (tmp_path / "prompted.png").exists()

    def test_blank_deck_exits_quietly(self, runner, session):
        result = runner.invoke(cli, [], input="\n")

        assert result.exit_code == 0
        assert session.requests == []

    def test_existing_output_declined(self, runner, make_deck, session, tmp_path):
        make_deck(["a"])
        (tmp_path / "deck.png").write_bytes(b"old")

        result = runner.invoke(cli, [DECK_ID, "-o", "deck.png"], input="n\n")

        assert result.exit_code == 0
        assert "Overwrite this file (y/N)? " in result.output
        assert (tmp_path / "deck.png").read_bytes() == b"old"
        assert session.requests == []

    def test_existing_output_with_yes_flag(self, runner, make_deck, tmp_path):
        make_deck(["a"])
        (tmp_path / "deck.png").write_bytes(b"old")

        result = runner.invoke(cli, [DECK_ID, "-o", "deck.png", "-y"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "deck.png").read_bytes() != b"old"

    def test_error_shows_cause_chain(self, runner, session, tmp_path):
        session.routes["https://decks.test/api/decks/" + DECK_ID + "/?links=cards"] = b"not json"

        result = runner.invoke(cli, [DECK_ID, "-o", "deck.png"])

        assert result.exit_code == 1
        assert f"Error: Invalid deck data for {DECK_ID}" in result.output
        assert "--> Invalid JSON format" in result.output
        assert not (tmp_path / "deck.png").exists()

    def test_bad_configuration(self, runner, monkeypatch):
        monkeypatch.setenv("DECKSHEET_TIMEOUT", "later")

        result = runner.invoke(cli, [DECK_ID, "-o", "deck.png"])

        assert result.exit_code == 1
        assert "DECKSHEET_TIMEOUT" in result.output

    def test_negative_timeout_is_usage_error(self, runner, session):
        result = runner.invoke(cli, [DECK_ID, "-o", "deck.png", "--timeout", "-1"])

        assert result.exit_code == 2
        assert session.requests == []

    def test_unwritable_output_checked_before_download(self, runner, make_deck, session, tmp_path):
        make_deck(["a", "b", "c", "d"])

        result = runner.invoke(cli, [DECK_ID, "-o", str(tmp_path / "nodir" / "deck.png")])

        assert result.exit_code == 1
        assert "Invalid file path" in result.output
        assert session.requests == []
