"""
CLI module - unified command-line interface.

Provides entry points for:
- Ranking the reference documents for a query
- Running the retrieval contract eval
- Running a full property analysis
"""

from rental_pricing_agent.cli.commands import (
    main,
    run_retrieve_cli,
    run_eval_cli,
    run_analyze_cli,
)

__all__ = [
    "main",
    "run_retrieve_cli",
    "run_eval_cli",
    "run_analyze_cli",
]
