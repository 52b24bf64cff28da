import sys

from cli._runner import run


def main() -> None:
    """Run unit tests."""
    sys.exit(run([sys.executable, "-m", "pytest"]))


def test_v() -> None:
    """Run unit tests with verbose output."""
    sys.exit(run([sys.executable, "-m", "pytest", "-v"]))


def test_integration() -> None:
    """Run the live-database suite (requires DB_INTEGRATION_URL)."""
    sys.exit(run([sys.executable, "-m", "pytest", "tests/integration", "-m", "integration"]))
