# oracles/fricas.py

"""
FriCAS as the high-precision oracle.

One long-lived `fricas` process is driven over its stdin/stdout. Values are
read from result lines like these (note the space after the minus sign):

   (13)  0.3300000000000000000000000E1
   (1)  - 0.3300000000000000000000000E1

The `cnf_*` functions come from a small FriCAS package that must be on the
library path given by `lib_dir`.
"""

from __future__ import annotations

import math
import re
import subprocess
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, TextIO

from ..core.errors import OracleUnavailableError
from ..core.types import Function

FRICAS_COMMANDS: Dict[Function, str] = {
    Function.SIN: "cnf_sin",
    Function.COS: "cnf_cos",
    Function.OMC: "cnf_1cs",
}

# leading part of the text that strtod would accept
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class FricasConfig:
    executable: str = "fricas"
    lib_dir: Optional[str] = None
    bits: int = 32768
    output_digits: int = 21
    # start-up messages to discard
    banner_lines: int = 17

    def argv(self) -> List[str]:
        evals = [")set output algebra off"]
        if self.lib_dir:
            evals.append(f")lib )dir {self.lib_dir}")
        evals += [
            ")set history off",
            ")set messages prompt none",
            ")set messages type off",
            f"bits({self.bits})$Float",
            f"outputGeneral({self.output_digits})$Float",
            "outputSpacing(0)$Float",
            ")set output algebra on",
        ]
        args = [self.executable, "-nosman"]
        for e in evals:
            args += ["-eval", e]
        return args


def format_command(fn: Function, x: float) -> str:
    return f"{FRICAS_COMMANDS[fn]}({x:27.20e})$CNF\n"


def parse_value(rest: str) -> float:
    """
    Parse what follows "(<n>)  " on a result line; NaN when nothing parses.
    A leading "- " is joined to the digits.
    """
    if rest.startswith("-"):
        rest = "-" + rest[2:]
    m = _NUMBER_RE.match(rest)
    if m is None:
        return math.nan
    return float(m.group(0))


class FricasOracle:
    """
    Oracle backed by a FriCAS subprocess.

    Start-up problems raise OracleUnavailableError. After that every failure
    (closed pipe, EOF, unparsable line) is reported on `errlog` and turned
    into NaN; nothing is retried.
    """

    def __init__(self, config: FricasConfig = FricasConfig(), *, errlog: Optional[TextIO] = None):
        self.config = config
        self.errlog = errlog if errlog is not None else sys.stderr
        try:
            self.proc = subprocess.Popen(
                config.argv(),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise OracleUnavailableError(f"failed to start FriCAS ({config.executable}): {e}") from e

        # Discard the redundant lines of FriCAS output.
        for i in range(config.banner_lines):
            if not self.proc.stdout.readline():
                self._kill()
                raise OracleUnavailableError(
                    f"EOF from FriCAS after {i} of {config.banner_lines} start-up lines"
                )

    def _warn(self, msg: str) -> None:
        print(f"trigulp: fricas: {msg}", file=self.errlog)

    def _kill(self) -> None:
        self.proc.kill()
        self.proc.wait()

    def _read_char(self) -> str:
        return self.proc.stdout.read(1)

    def evaluate(self, fn: Function, x: float) -> float:
        try:
            self.proc.stdin.write(format_command(fn, x))
            self.proc.stdin.flush()
        except (OSError, ValueError) as e:
            self._warn(f"write failed: {e}")
            return math.nan

        # Skip "[^)]*)  ".
        while True:
            c = self._read_char()
            if not c:
                self._warn("EOF while waiting for a result")
                return math.nan
            if c == ")":
                break
        for _ in range(2):
            if not self._read_char():
                self._warn("EOF inside a result line")
                return math.nan

        line = self.proc.stdout.readline()
        if not line:
            self._warn("EOF inside a result line")
            return math.nan
        v = parse_value(line)
        if math.isnan(v):
            self._warn(f"cannot parse {line.rstrip()!r}")
        return v

    def close(self) -> int:
        for stream in (self.proc.stdin, self.proc.stdout):
            try:
                stream.close()
            except OSError as e:
                self._warn(f"close failed: {e}")
        return self.proc.wait()

    def __enter__(self) -> "FricasOracle":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
