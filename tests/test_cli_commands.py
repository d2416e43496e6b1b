"""
Unit Tests for CLI Commands

Tests the CLI entry points. Retrieval and eval run for real (they are
fast and make no LLM calls); the analysis call is mocked.

PATTERNS:
---------
1. Mock the expensive agent call
2. Test CLI argument parsing
3. Verify exit codes
4. Test error handling
"""

import json
from unittest.mock import patch

from rental_pricing_agent.cli import commands
from rental_pricing_agent.core import AgentError, AgentResult
from rental_pricing_agent.schemas.property_analysis import (
    AgentRecommendation,
    PropertyAnalysis,
)


# ---------------------------------------------------------------------------
# LOAD_ENV TESTS
# ---------------------------------------------------------------------------


class TestLoadEnv:

    def test_load_env_does_not_raise(self):
        commands._load_env()


# ---------------------------------------------------------------------------
# MAIN CLI DISPATCH TESTS
# ---------------------------------------------------------------------------


class TestMainCliDispatch:
    """Test main CLI dispatches to correct handlers."""

    def test_dispatches_to_retrieve(self):
        with patch.object(commands, "run_retrieve_cli", return_value=0) as mock_retrieve:
            with patch("sys.argv", ["pricing-agent", "retrieve", "Cairo", "-k", "2"]):
                result = commands.main()

            mock_retrieve.assert_called_once()
            assert result == 0

    def test_remaining_args_reinjected(self):
        """Subcommand arguments reach the subcommand parser via sys.argv."""
        seen = {}

        def fake_retrieve():
            import sys

            seen["argv"] = list(sys.argv)
            return 0

        with patch.object(commands, "run_retrieve_cli", side_effect=fake_retrieve):
            with patch("sys.argv", ["pricing-agent", "retrieve", "Cairo", "-k", "2"]):
                commands.main()

        assert seen["argv"] == ["pricing-agent", "Cairo", "-k", "2"]

    def test_dispatches_to_eval(self):
        with patch.object(commands, "run_eval_cli", return_value=1) as mock_eval:
            with patch("sys.argv", ["pricing-agent", "eval"]):
                result = commands.main()

            mock_eval.assert_called_once()
            assert result == 1

    def test_dispatches_to_analyze(self):
        with patch.object(commands, "run_analyze_cli", return_value=0) as mock_analyze:
            with patch("sys.argv", ["pricing-agent", "analyze", "--location", "Giza"]):
                commands.main()

            mock_analyze.assert_called_once()

    def test_handles_keyboard_interrupt(self):
        with patch.object(commands, "run_eval_cli", side_effect=KeyboardInterrupt()):
            with patch("sys.argv", ["pricing-agent", "eval"]):
                result = commands.main()

        assert result == commands.EXIT_INTERRUPTED


# ---------------------------------------------------------------------------
# RETRIEVE
# ---------------------------------------------------------------------------


class TestRetrieveCli:

    def test_json_output(self, capsys):
        with patch("sys.argv", ["pricing-agent", "rental pricing Cairo", "-k", "2", "--json"]):
            result = commands.run_retrieve_cli()

        assert result == commands.EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert len(payload) == 2
        assert set(payload[0]) == {"title", "category", "content", "relevance_score"}

    def test_text_output(self, capsys):
        with patch("sys.argv", ["pricing-agent", "pricing strategy"]):
            result = commands.run_retrieve_cli()

        out = capsys.readouterr().out
        assert result == commands.EXIT_OK
        assert "  1. [" in out
        assert "  3. [" in out
        assert "  4. [" not in out

    def test_empty_query(self, capsys):
        with patch("sys.argv", ["pricing-agent", "", "--json"]):
            result = commands.run_retrieve_cli()

        assert result == commands.EXIT_OK
        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_non_positive_k_is_invalid_input(self, capsys):
        with patch("sys.argv", ["pricing-agent", "pricing", "-k", "0"]):
            result = commands.run_retrieve_cli()

        assert result == commands.EXIT_INVALID_INPUT
        assert "Error:" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# EVAL
# ---------------------------------------------------------------------------


class TestEvalCli:

    def test_gate_passes(self, capsys):
        with patch("sys.argv", ["pricing-agent"]):
            result = commands.run_eval_cli()

        out = capsys.readouterr().out
        assert result == commands.EXIT_OK
        assert "[PASS] query-001" in out
        assert "RETRIEVAL CONTRACT GATE: PASSED" in out

    def test_quiet(self, capsys):
        with patch("sys.argv", ["pricing-agent", "--quiet"]):
            commands.run_eval_cli()

        assert "[PASS]" not in capsys.readouterr().out


# ---------------------------------------------------------------------------
# ANALYZE
# ---------------------------------------------------------------------------


ANALYZE_ARGV = [
    "pricing-agent",
    "--location", "Zamalek, Cairo",
    "--size-sqm", "100",
    "--bedrooms", "2",
    "--elevator",
    "--finishing", "medium",
]


class TestAnalyzeCli:

    def test_invalid_property(self, capsys):
        argv = ["pricing-agent", "--location", "Giza", "--size-sqm", "0", "--bedrooms", "1"]
        with patch("sys.argv", argv):
            result = commands.run_analyze_cli()

        assert result == commands.EXIT_INVALID_INPUT
        assert "Invalid property" in capsys.readouterr().err

    def test_agent_error(self, capsys):
        error = AgentError(error_type="ConfigurationError", error_message="no key")
        with patch("rental_pricing_agent.agent.run_analysis", return_value=error):
            with patch("sys.argv", ANALYZE_ARGV):
                result = commands.run_analyze_cli()

        assert result == commands.EXIT_FAILURE
        assert "ConfigurationError" in capsys.readouterr().err

    def test_success(self, capsys, sample_recommendation):
        analysis = PropertyAnalysis.from_recommendation(
            "2BR in Zamalek, Cairo, 100sqm, medium",
            [],
            AgentRecommendation.model_validate(sample_recommendation),
        )
        agent_result = AgentResult(
            output=analysis,
            latency_ms=850.0,
            input_tokens=1200,
            output_tokens=300,
            total_tokens=1500,
            model="gpt-4o-mini",
        )
        with patch("rental_pricing_agent.agent.run_analysis", return_value=agent_result) as mock_run:
            with patch("sys.argv", ANALYZE_ARGV):
                result = commands.run_analyze_cli()

        out = capsys.readouterr().out
        assert result == commands.EXIT_OK
        assert "Recommended rent: 18,000 EGP/month" in out
        assert "  - Book photographer" in out

        prop = mock_run.call_args.args[0]
        assert prop.has_elevator is True
        assert prop.has_parking is False
        assert prop.finishing_quality == "medium"
