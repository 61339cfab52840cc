import os
import sys

import pytest


# Add the colocated "bin/" dir, as a dir of importable modules

sys.path.insert(0, os.path.join(os.path.split(__file__)[0], os.pardir, "bin"))


class BrokenStdin:
    """Open fine, but fail every read, as stdin does after a device error"""

    def __init__(self):
        self.buffer = self

    def isatty(self):
        return False

    def readline(self):
        raise OSError(5, "Input/output error")

    def read(self, size=-1):
        raise OSError(5, "Input/output error")


@pytest.fixture
def broken_stdin(monkeypatch):
    stdin = BrokenStdin()
    monkeypatch.setattr(sys, "stdin", stdin)

    return stdin
