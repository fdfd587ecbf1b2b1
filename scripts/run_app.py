"""
CLI script to launch the Streamlit search interface.

Usage:
    python scripts/run_app.py              # Default port 8501
    python scripts/run_app.py --port 8502  # Custom port
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
APP_PATH = PROJECT_ROOT / "pagesearch" / "gui" / "app.py"


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Launch the page search web interface"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Port to run the application on (default: 8501)"
    )

    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Host to bind to (default: localhost)"
    )

    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't open browser automatically"
    )

    return parser.parse_args()


def build_command(port: int, host: str, headless: bool) -> list:
    """Build the streamlit invocation for the app."""
    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(APP_PATH),
        "--server.port", str(port),
        "--server.address", host,
    ]

    if headless:
        cmd.extend(["--server.headless", "true"])

    return cmd


def main():
    """Main entry point for launching the app."""
    args = parse_args()

    if not APP_PATH.exists():
        print(f"Error: Application file not found: {APP_PATH}")
        sys.exit(1)

    print(f"Page Search running on http://{args.host}:{args.port} (Ctrl+C to stop)")

    try:
        subprocess.run(build_command(args.port, args.host, args.no_browser), cwd=str(PROJECT_ROOT))
    except KeyboardInterrupt:
        print("\nShutting down...")
    except FileNotFoundError:
        print("Error: Streamlit not found. Install with: pip install streamlit")
        sys.exit(1)


if __name__ == "__main__":
    main()
