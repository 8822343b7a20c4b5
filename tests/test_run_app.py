import sys

import run_app


def test_build_command_targets_app():
    cmd = run_app.build_command()
    assert cmd[:4] == [sys.executable, "-m", "streamlit", "run"]
    assert cmd[4].endswith("app.py")


def test_build_command_forwards_extra_args():
    cmd = run_app.build_command(["--server.port", "8600"])
    assert cmd[-2:] == ["--server.port", "8600"]
