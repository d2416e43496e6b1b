"""
CLI commands - entry points for retrieval, evaluation and analysis.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment
3. Run the operation
4. Print results
5. Return exit code (0 ok, 1 failure, 2 invalid input)

CLI commands are thin wrappers: argument parsing and output formatting
live here, the work is delegated to the retrieval, eval and agent modules.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130


def _load_env() -> None:
    """Load environment variables from a .env file, if present."""
    load_dotenv()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_retrieve_cli() -> int:
    """CLI entry point for a single retrieval."""
    from rental_pricing_agent.errors import InvalidArgumentError
    from rental_pricing_agent.retrieval import DEFAULT_TOP_K, get_retriever

    _load_env()

    parser = argparse.ArgumentParser(description="Retrieve reference documents for a query")
    parser.add_argument("query", help="Free-text query (may be empty)")
    parser.add_argument(
        "-k",
        "--top-k",
        type=int,
        default=DEFAULT_TOP_K,
        help=f"Number of documents to return (default: {DEFAULT_TOP_K})",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args()

    try:
        results = get_retriever().retrieve(args.query, k=args.top_k)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return EXIT_OK

    print("=" * 60)
    print(f"RETRIEVAL: {args.query!r} (k={args.top_k})")
    print("=" * 60)
    for rank, result in enumerate(results, start=1):
        print(f"  {rank}. [{result.relevance_score:.3f}] {result.title} ({result.category})")

    return EXIT_OK


def run_eval_cli() -> int:
    """CLI entry point for the retrieval contract eval."""
    from rental_pricing_agent.evals.retrieval_eval import run_retrieval_eval

    _load_env()

    parser = argparse.ArgumentParser(description="Run retrieval contract eval")
    parser.add_argument("--quiet", action="store_true", help="Minimal output")
    args = parser.parse_args()

    print("=" * 60)
    print("RETRIEVAL CONTRACT EVAL")
    print("=" * 60)

    report = run_retrieval_eval()

    if not args.quiet:
        for result in report.results:
            status = "PASS" if result.passed else "FAIL"
            print(f"  [{status}] {result.case_id} (k={result.k}) {result.query!r}")
            for failure in result.failures[:3]:
                print(f"        Error: {failure}")

    print(f"\nPass rate: {report.pass_rate:.1%}")
    print(f"Total: {report.passed_cases}/{report.total_cases}")

    if report.all_passed:
        print("\n>>> RETRIEVAL CONTRACT GATE: PASSED <<<")
        return EXIT_OK
    else:
        print("\n>>> RETRIEVAL CONTRACT GATE: FAILED <<<")
        return EXIT_FAILURE


def build_analyze_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze a rental property")
    parser.add_argument("--location", required=True, help="e.g. 'Zamalek, Cairo'")
    parser.add_argument("--size-sqm", type=int, required=True)
    parser.add_argument("--bedrooms", type=int, required=True)
    parser.add_argument("--bathrooms", type=int, default=1)
    parser.add_argument("--floor", type=int, default=0)
    parser.add_argument("--elevator", action="store_true", help="Building has an elevator")
    parser.add_argument("--parking", action="store_true", help="Unit has parking")
    parser.add_argument("--near-beach", action="store_true")
    parser.add_argument(
        "--finishing",
        choices=["basic", "standard", "medium", "premium", "luxury"],
        default="standard",
    )
    parser.add_argument("--property-value", type=int, default=None, help="Value in EGP")
    parser.add_argument("--model", default=None, help="Override AGENT_MODEL")
    parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    return parser


def run_analyze_cli() -> int:
    """CLI entry point for a full property analysis (calls the LLM)."""
    from pydantic import ValidationError

    from rental_pricing_agent.agent import run_analysis
    from rental_pricing_agent.core import AgentError
    from rental_pricing_agent.observability import init_phoenix, shutdown_phoenix
    from rental_pricing_agent.schemas.property_analysis import PropertyInput

    _load_env()

    args = build_analyze_parser().parse_args()

    try:
        prop = PropertyInput(
            location=args.location,
            size_sqm=args.size_sqm,
            bedrooms=args.bedrooms,
            bathrooms=args.bathrooms,
            floor=args.floor,
            has_elevator=args.elevator,
            has_parking=args.parking,
            finishing_quality=args.finishing,
            near_beach=args.near_beach,
            property_value_egp=args.property_value,
        )
    except ValidationError as e:
        print(f"Invalid property: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    init_phoenix()
    try:
        result = run_analysis(prop, model=args.model)
    finally:
        shutdown_phoenix()

    if isinstance(result, AgentError):
        print(f"ERROR: {result.error_type}: {result.error_message}", file=sys.stderr)
        return EXIT_FAILURE

    analysis = result.output
    if args.json:
        print(analysis.model_dump_json(indent=2))
        return EXIT_OK

    pricing = analysis.pricing_recommendation
    readiness = analysis.launch_readiness
    risk = analysis.risk_assessment

    print("=" * 60)
    print(f"ANALYSIS: {analysis.property_summary}")
    print("=" * 60)
    print(
        f"Recommended rent: {pricing.recommended_price_egp:,} EGP/month "
        f"(range {pricing.price_range_min:,}-{pricing.price_range_max:,}, "
        f"{pricing.confidence} confidence)"
    )
    print(f"Strategy: {pricing.strategy}")
    print(f"Readiness: {readiness.readiness_score}/100 ({readiness.status})")
    print(f"Risk level: {risk.risk_level}")
    print("\nNext steps:")
    for step in analysis.next_steps:
        print(f"  - {step}")
    print(f"\nModel: {result.model} | Latency: {result.latency_ms:.0f}ms | Tokens: {result.total_tokens}")

    return EXIT_OK


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        pricing-agent retrieve "rental pricing Cairo" -k 3
        pricing-agent eval
        pricing-agent analyze --location "Zamalek, Cairo" --size-sqm 100 --bedrooms 2
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="Rental pricing agent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  retrieve    Rank the reference documents for a query (no LLM calls)
  eval        Run the retrieval contract eval (no LLM calls)
  analyze     Full pricing analysis for a property (calls the LLM)

Examples:
  pricing-agent retrieve "rental pricing Cairo" -k 3
  pricing-agent retrieve "" --json
  pricing-agent analyze --location "Zamalek, Cairo" --size-sqm 100 --bedrooms 2 --elevator
        """,
    )

    parser.add_argument(
        "command",
        choices=["retrieve", "eval", "analyze"],
        help="Operation to run",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    # Parse just the command first
    args, remaining = parser.parse_known_args()
    _configure_logging(args.verbose)

    commands = {
        "retrieve": run_retrieve_cli,
        "eval": run_eval_cli,
        "analyze": run_analyze_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
