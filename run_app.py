import sys
import subprocess
from pathlib import Path

APP_PATH = Path(__file__).resolve().parent / "app.py"


def build_command(extra_args=None):
    """streamlit CLI invocation for the analyzer app; extra args go to streamlit."""
    return [sys.executable, "-m", "streamlit", "run", str(APP_PATH), *(extra_args or [])]


def run():
    cmd = build_command(sys.argv[1:])
    print(f"Running command: {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=APP_PATH.parent).returncode


if __name__ == "__main__":
    sys.exit(run())
