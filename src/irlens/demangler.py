"""
Symbol Demangling.

The IR pass does not demangle names itself. It hands its output lines to a
Demangler collaborator. The stock implementation pipes the mangled symbols
found in the IR through an external demangler executable (`llvm-cxxfilt`
by default) and rewrites the lines with the readable names.
"""

import logging
import re
import subprocess
from typing import Dict, Iterable, List, Protocol

from .config import DEFAULT_DEMANGLER
from .core.exceptions import DemanglerError
from .core.types import OutputLine

logger = logging.getLogger(__name__)

# @_Z3fooi, @"_ZN3foo3barEv", @_RNvCs1234_7mycrate3foo
MANGLED_SYMBOL_RE = re.compile(r'@(?:"((?:_Z|_R)[^"]+)"|((?:_Z|_R)[\w.$]+))')


class Demangler(Protocol):
    """Collaborator that rewrites mangled names in processed IR lines."""

    def process(self, lines: List[OutputLine]) -> List[OutputLine]:
        ...


def collect_symbols(lines: Iterable[OutputLine]) -> List[str]:
    """Mangled symbols referenced by the lines, in first-seen order."""
    symbols: Dict[str, None] = {}
    for line in lines:
        for match in MANGLED_SYMBOL_RE.finditer(line.text):
            symbols[match.group(1) or match.group(2)] = None
    return list(symbols)


class LlvmIrDemangler:
    """
    Demangles IR lines using an external demangler executable.

    The executable reads one symbol per line on stdin and writes one
    demangled name per line on stdout.

    Attributes:
        executable: Demangler command (e.g. `llvm-cxxfilt`, `c++filt`).
        timeout: Seconds to wait for the demangler.
    """

    def __init__(self, executable: str = DEFAULT_DEMANGLER, timeout: float = 30.0):
        self.executable = executable
        self.timeout = timeout

    def demangle_symbols(self, symbols: List[str]) -> Dict[str, str]:
        """
        Map each mangled symbol to its demangled form.

        Raises:
            DemanglerError: If the executable is missing, fails, times out,
                or returns a different number of lines than it was given.
        """
        if not symbols:
            return {}

        logger.debug(f"Running: {self.executable} on {len(symbols)} symbols")
        try:
            result = subprocess.run(
                [self.executable],
                input="\n".join(symbols) + "\n",
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise DemanglerError(self.executable, "executable not found") from e
        except subprocess.CalledProcessError as e:
            raise DemanglerError(self.executable, f"exited with {e.returncode}: {e.stderr.strip()}") from e
        except subprocess.TimeoutExpired as e:
            raise DemanglerError(self.executable, f"timed out after {self.timeout}s") from e

        demangled = result.stdout.splitlines()
        if len(demangled) != len(symbols):
            logger.error(f"{self.executable} returned {len(demangled)} lines for {len(symbols)} symbols")
            raise DemanglerError(
                self.executable,
                f"expected {len(symbols)} output lines, got {len(demangled)}",
            )
        return dict(zip(symbols, demangled))

    def process(self, lines: List[OutputLine]) -> List[OutputLine]:
        mapping = self.demangle_symbols(collect_symbols(lines))
        mapping = {k: v for k, v in mapping.items() if k != v}
        if not mapping:
            return lines

        alternatives = "|".join(re.escape(s) for s in sorted(mapping, key=len, reverse=True))
        pattern = re.compile(rf"(?<![\w.$])(?:{alternatives})(?![\w.$])")

        processed = []
        for line in lines:
            text = pattern.sub(lambda m: mapping[m.group(0)], line.text)
            if text == line.text:
                processed.append(line)
            else:
                processed.append(line.model_copy(update={"text": text}))
        return processed
