"""Tests for the per-command interaction log line."""

import logging

import pytest

from core.interaction_logger import Interaction, format_interaction, track_interaction


def test_format_with_tokens_and_cost():
    line = format_interaction(Interaction("ask", user="Rylai#1234", tokens=154, cost=0.0000924), 842.4)

    assert line == "CMD /ask by Rylai#1234 200 - 842 ms - Tokens: 154 - Cost: $0.000092"


def test_format_without_tokens_or_cost_uses_dashes():
    line = format_interaction(Interaction("coinflip"), 3.2)

    assert line == "CMD /coinflip by anonymous 200 - 3 ms - Tokens: - - Cost: -"


def test_track_interaction_logs_on_success(caplog):
    with caplog.at_level(logging.INFO, logger="interactions"):
        with track_interaction("movies", user="Lina") as interaction:
            interaction.status = 200

    assert len(caplog.records) == 1
    assert caplog.records[0].getMessage().startswith("CMD /movies by Lina 200 - ")


def test_track_interaction_marks_escaping_errors_as_500(caplog):
    with caplog.at_level(logging.INFO, logger="interactions"):
        with pytest.raises(RuntimeError):
            with track_interaction("heroes"):
                raise RuntimeError("boom")

    assert " 500 - " in caplog.records[0].getMessage()


def test_track_interaction_keeps_an_explicit_error_status(caplog):
    with caplog.at_level(logging.INFO, logger="interactions"):
        with pytest.raises(LookupError):
            with track_interaction("match") as interaction:
                interaction.status = 404
                raise LookupError("missing")

    assert " 404 - " in caplog.records[0].getMessage()
