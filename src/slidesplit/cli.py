"""Command-line interface for splitting text into slides."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from slidesplit.core.util import safe_json
from slidesplit.policy.loader import load_policy, PolicyLoadError
from slidesplit.policy.schema import SplitPolicy
from slidesplit.runtime.planner import SlidePlanner
from slidesplit.segmenters.classifier import detect_content_type
from slidesplit.segmenters.normalize import normalize, truncate_text


class ConsoleLogger:
    """Logger that writes structured events to stderr."""

    def _emit(self, level: str, msg: str, kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}".rstrip(), file=sys.stderr)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)


def _read_text(args) -> str:
    """Read input text from --text, a file path, or stdin ('-')."""
    if getattr(args, "text", None) is not None:
        return args.text
    if args.source in (None, "-"):
        return sys.stdin.read()
    return Path(args.source).read_text(encoding="utf-8")


def _load_policy(args) -> Optional[SplitPolicy]:
    if getattr(args, "policy", None):
        return load_policy(args.policy)
    return None


def _make_planner(args) -> SlidePlanner:
    logger = ConsoleLogger() if getattr(args, "verbose", False) else None
    return SlidePlanner(policy=_load_policy(args), logger=logger)


def split_command(args):
    """Split text into slide fragments."""
    try:
        planner = _make_planner(args)
        text = normalize(_read_text(args))
        target = args.slides if args.slides else planner.optimal_slide_count(text)

        plan = planner.plan(text, target)

        if args.json:
            print(safe_json({
                "fragments": plan.fragments,
                "content_type": plan.content_type,
                "target_slides": plan.target_slides,
                "used_fallback": plan.used_fallback,
                "length_summary": plan.length_summary,
            }))
            return 0

        content_type = plan.content_type.value if plan.content_type else "none"
        print(f"📑 {plan.slide_count} slides (target {plan.target_slides}, {content_type})")
        if plan.used_fallback:
            print("   ⚠️  length fallback used")
        for i, fragment in enumerate(plan.fragments, start=1):
            print(f"\n--- Slide {i} ({len(fragment)} chars)")
            print(fragment)
        return 0

    except PolicyLoadError as e:
        print(f"❌ Policy error: {e}")
        return 1
    except OSError as e:
        print(f"❌ Cannot read input: {e}")
        return 1


def estimate_command(args):
    """Print the live slide-count estimate for a text."""
    try:
        planner = _make_planner(args)
        text = _read_text(args)
        print(planner.estimate(text, chars_per_slide=args.chars_per_slide))
        return 0
    except PolicyLoadError as e:
        print(f"❌ Policy error: {e}")
        return 1
    except OSError as e:
        print(f"❌ Cannot read input: {e}")
        return 1


def classify_command(args):
    """Print the content type and recommended slide count for a text."""
    try:
        planner = _make_planner(args)
        text = _read_text(args)
        content_type = detect_content_type(text.strip(), planner.policy.technical_markers)
        print(f"Content type: {content_type.value}")
        print(f"Recommended slides: {planner.optimal_slide_count(normalize(text))}")
        print(f"Preview: {truncate_text(normalize(text), 60)}")
        return 0
    except PolicyLoadError as e:
        print(f"❌ Policy error: {e}")
        return 1
    except OSError as e:
        print(f"❌ Cannot read input: {e}")
        return 1


def validate_policy_command(args):
    """Validate a split policy file."""
    try:
        policy_path = Path(args.policy_file)
        if not policy_path.exists():
            print(f"Error: Policy file not found: {policy_path}")
            return 1

        print(f"Validating policy: {policy_path}")
        policy = load_policy(policy_path)

        print("✅ Policy validation successful!")
        print(f"   Version: {policy.version}")
        print(f"   Limits: short_text_floor={policy.limits.short_text_floor}, "
              f"single_slide_below={policy.limits.single_slide_below}")
        print(f"   Undersized chunks: {policy.undersized}")

        if args.verbose:
            print("\nRules:")
            for content_type, rule in policy.rules.items():
                print(f"   {content_type.value}: {rule.min_slides}-{rule.max_slides} slides, "
                      f"{rule.chars_per_slide or '-'} chars/slide")

        return 0

    except PolicyLoadError as e:
        print(f"❌ Policy validation failed: {e}")
        return 1


def info_command(args):
    """Display version and system information."""
    print("slidesplit CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("slidesplit")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nDependencies:")
    for module_name, dist_name in (("numpy", "numpy"), ("pydantic", "pydantic"), ("yaml", "PyYAML")):
        try:
            module = __import__(module_name)
            print(f"   ✅ {dist_name}: {getattr(module, '__version__', 'unknown')}")
        except ImportError:
            print(f"   ❌ {dist_name}: not installed")

    return 0


def _add_input_arguments(parser):
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Path to a text file, or '-' for stdin (default)"
    )
    parser.add_argument(
        "-t", "--text",
        help="Text to process instead of reading SOURCE"
    )
    parser.add_argument(
        "-p", "--policy",
        help="Path to a split policy YAML file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log planner decisions to stderr"
    )


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="slidesplit",
        description="Split text into carousel slide fragments"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split text into slides"
    )
    _add_input_arguments(split_parser)
    split_parser.add_argument(
        "-n", "--slides",
        type=int,
        help="Target slide count (default: recommended count for the text)"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the plan as JSON"
    )

    # Estimate command
    estimate_parser = subparsers.add_parser(
        "estimate",
        help="Estimate how many slides a text needs"
    )
    _add_input_arguments(estimate_parser)
    estimate_parser.add_argument(
        "--chars-per-slide",
        type=int,
        help="Never estimate fewer slides than length / this"
    )

    # Classify command
    classify_parser = subparsers.add_parser(
        "classify",
        help="Show the detected content type of a text"
    )
    _add_input_arguments(classify_parser)

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a split policy file"
    )
    validate_parser.add_argument(
        "policy_file",
        help="Path to the policy YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per content type rules"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "estimate":
        return estimate_command(args)
    elif args.command == "classify":
        return classify_command(args)
    elif args.command == "validate":
        return validate_policy_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
