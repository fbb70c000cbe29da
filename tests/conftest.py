import pytest
import os
import sys
import subprocess
from pathlib import Path


@pytest.fixture
def sample_payload():
    """A payload spanning three lines, the last one short."""
    return bytes(range(256))[:101]


@pytest.fixture
def text_payload():
    return b"Hello there.\nGeneral Kenobi..\nYou are a bold one.\n" * 3


@pytest.fixture
def cli_test_env(tmp_path, request):
    """
    Sets up a temporary directory and a helper for running the zpaper CLI.
    """

    def run_command(cmd, input_bytes=None):
        full_cmd = [sys.executable, "-m", "zpaper.cli.main"] + cmd
        result = subprocess.run(
            full_cmd,
            cwd=tmp_path,
            input=input_bytes,
            capture_output=True,
            check=False,
            env={**os.environ, "COLUMNS": "120"},
        )

        if result.returncode != 0 and request.config.getoption("capture") == "no":
            print("Error running command:", " ".join(full_cmd))
            print("Stderr:", result.stderr.decode(errors="replace"))
        return result

    return run_command, tmp_path
