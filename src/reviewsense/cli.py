"""Command-line interface for ReviewSense."""

import argparse
import logging
import random
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants, TelemetryConstants
from .services.credentials import CredentialStore
from .services.telemetry import TelemetrySink
from .utils.data_prep import export_to_json, prepare_export
from .workflow.controller import BootstrapState, SessionContext, WorkflowController
from .workflow.view import ViewState

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def build_controller(args, *, pipeline_factory=None):
    """Wire a controller for one CLI session."""
    store = CredentialStore()
    context = SessionContext.from_settings(
        pipeline_factory=pipeline_factory,
        credential_store=store,
        model_id=args.model,
        dataset_location=args.dataset,
        user_agent=f"{TelemetryConstants.USER_AGENT} (cli)",
    )
    telemetry = None if args.no_telemetry else TelemetrySink()
    rng = random.Random(args.seed) if args.seed is not None else None
    return WorkflowController(context, ViewState(), telemetry=telemetry, rng=rng)


def cmd_analyze(args, *, pipeline_factory=None):
    """Analyze command: bootstrap once, then run the requested number of analyses."""
    controller = build_controller(args, pipeline_factory=pipeline_factory)
    view = controller.view

    print(f"Loading dataset from {controller.context.dataset_location}...")
    print(f"Loading model {controller.context.classifier.model_id}...")
    if controller.start() is not BootstrapState.READY:
        print(view.status_message)
        print(f"Error: {view.error_message}")
        return 1

    print(f"{view.status_message} ({len(controller.context.dataset)} reviews)")

    failures = 0
    for i in range(1, args.count + 1):
        interpretation = controller.on_analyze_requested()
        print(f"\n[{i}/{args.count}] {view.review_text[:200]}")
        if interpretation is None:
            failures += 1
            print(f"  Error: {view.error_message}")
            continue
        print(f"  {interpretation.label} (Confidence Score: {interpretation.confidence_percent})")

    if args.out:
        payload = prepare_export(
            controller.context.history,
            len(controller.context.dataset),
            controller.context.classifier.model_id,
        )
        export_to_json(payload, args.out)
        print(f"\nResults exported to {args.out}")

    return 1 if failures == args.count else 0


def cmd_token(args):
    """Show, set or clear the stored Hugging Face token."""
    store = CredentialStore()
    try:
        if args.clear:
            store.clear()
            print("Stored token cleared")
        elif args.value is not None:
            value = args.value.strip()
            if not value:
                print("Token is empty; nothing stored")
                return 1
            store.save(value)
            print("Token stored")
        else:
            current = store.load()
            if current:
                print(f"Stored token: {current[:4]}{'*' * max(0, len(current) - 4)}")
            else:
                print("No token stored")
    finally:
        store.close()
    return 0


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return 1

    print("Launching ReviewSense UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return 0


def _positive_int(value):
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return count


def build_parser():
    parser = argparse.ArgumentParser(description="ReviewSense - Review Sentiment Analyzer")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Classify random reviews from the dataset')
    analyze_parser.add_argument('--count', type=_positive_int, default=1, help='Number of analyses to run')
    analyze_parser.add_argument('--dataset', default=None, help='Dataset path or URL')
    analyze_parser.add_argument('--model', default=None, help='Pretrained model identifier')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--no-telemetry', action='store_true', help='Do not log analyses')
    analyze_parser.add_argument('--seed', type=int, default=None, help='Random seed for sampling')

    # Token command
    token_parser = subparsers.add_parser('token', help='Manage the stored Hugging Face token')
    token_parser.add_argument('value', nargs='?', help='Token to store')
    token_parser.add_argument('--clear', action='store_true', help='Remove the stored token')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            code = cmd_analyze(args)
        elif args.command == 'token':
            code = cmd_token(args)
        else:
            code = cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        code = 130
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)

    if code:
        sys.exit(code)
