"""The interactive loop: read a line, check it and run builtins."""

import os
import sys
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Optional, TextIO

from minishell.builtins import DirectoryChanger, ShellExit, run_builtin
from minishell.cstring import split
from minishell.environment import Environment
from minishell.syntax import (
    ShellSyntaxError,
    check_quotes_closed,
    check_special_chars,
    neutralize_double_quoted,
    neutralize_single_quoted,
)

PROMPT = "minishell : "


class Shell:
    """One shell session with its own environment and directory state."""

    def __init__(
        self,
        environ: Optional[Mapping] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        source = dict(os.environ) if environ is None else dict(environ)
        self.environment = Environment.from_envp(source)
        self.changer = DirectoryChanger(source)
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err

    def run_line(self, line: str) -> Optional[int]:
        """Run one input line and return the builtin's status, or None.

        Raises ShellSyntaxError for unclosed quotes and ShellExit from exit.
        Misplaced operators are reported on the error stream after the
        builtin ran.
        """
        args: List[str] = split(line, " ")
        if not args:
            return None
        check_quotes_closed(line)
        neutral = neutralize_single_quoted(neutralize_double_quoted(line))
        status = run_builtin(args, self.environment, self.changer, self.out, self.err)
        try:
            check_special_chars(neutral)
        except ShellSyntaxError as exc:
            self.err.write(exc.message + "\n")
        return status

    def run(self, lines: Iterable[str]) -> int:
        """Run lines until they run out; return the shell's exit status."""
        for line in lines:
            try:
                self.run_line(line)
            except ShellSyntaxError as exc:
                self.err.write(exc.message + "\n")
                return 1
            except ShellExit as exc:
                return exc.status
        self.environment.clear()
        return 0


def _prompted_lines() -> Iterator[str]:
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv: Optional[List[str]] = None) -> int:
    """Start an interactive session on the terminal."""
    try:
        import readline  # noqa: F401  (enables line editing and history for input())
    except ImportError:
        pass
    return Shell().run(_prompted_lines())


if __name__ == "__main__":
    sys.exit(main())