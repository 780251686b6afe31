"""The builtin commands: pwd, env, echo, cd, export, unset and exit."""

import os
import sys
from collections.abc import Mapping
from typing import List, Optional, Sequence, TextIO

from minishell.chars import isdigit
from minishell.environment import Environment, InvalidIdentifierError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

NUMBER_OK = 0
NUMBER_INVALID = 1
NUMBER_OUT_OF_RANGE = 2


class ShellExit(Exception):
    """Raised by the exit builtin; ``status`` is the code the shell ends with."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"exit {status}")


def _stream(stream: Optional[TextIO], default: TextIO) -> TextIO:
    return default if stream is None else stream


def is_numeric(text: Optional[str]) -> bool:
    """Return True when ``text`` is an optional sign followed only by digits."""
    if text is None:
        return False
    body = text[1:] if text[:1] in ("+", "-") else text
    return all(isdigit(ch) for ch in body)


def valid_number(text: str) -> int:
    """Check ``text`` as a signed 32-bit decimal.

    Return NUMBER_OK, NUMBER_INVALID for something that is not a number,
    or NUMBER_OUT_OF_RANGE when it leaves the 32-bit range.
    """
    sign = 1
    body = text
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if not body:
        return NUMBER_INVALID
    result = 0
    for ch in body:
        if not "0" <= ch <= "9":
            return NUMBER_INVALID
        result = result * 10 + (ord(ch) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            return NUMBER_OUT_OF_RANGE
    return NUMBER_OK


def pwd(out: Optional[TextIO] = None) -> int:
    """Print the current working directory."""
    _stream(out, sys.stdout).write(os.getcwd() + "\n")
    return 0


def env(environment: Environment, out: Optional[TextIO] = None) -> int:
    """Print every variable in insertion order."""
    target = _stream(out, sys.stdout)
    for line in environment.env_lines():
        target.write(line + "\n")
    return 0


def echo(args: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Print the arguments after the command name; a first ``-n`` drops the newline."""
    words = list(args[1:])
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    text = " ".join(words)
    _stream(out, sys.stdout).write(text + "\n" if newline else text)
    return 0


def _current_directory() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError:
        return None


class DirectoryChanger:
    """Runs cd and remembers the directory it last left."""

    def __init__(self, environ: Optional[Mapping] = None) -> None:
        self._environ = os.environ if environ is None else environ
        self.oldpwd: Optional[str] = None

    def cd(
        self,
        path: Optional[str] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> int:
        """Change directory; no path means HOME and ``-`` means the previous one."""
        out = _stream(out, sys.stdout)
        err = _stream(err, sys.stderr)
        cwd = _current_directory()
        if not path:
            path = self._environ.get("HOME")
            if path is None:
                out.write("HOME not set")
                return 1
        elif path == "-":
            return self._back(out, err)
        if not self._chdir(path, err):
            return 1
        self.oldpwd = cwd
        return 0

    def _back(self, out: TextIO, err: TextIO) -> int:
        if self.oldpwd is None:
            out.write("oldpwd not set")
            return 1
        out.write(self.oldpwd + "\n")
        return 0 if self._chdir(self.oldpwd, err) else 1

    @staticmethod
    def _chdir(path: str, err: TextIO) -> bool:
        try:
            os.chdir(path)
        except OSError as exc:
            err.write(f"cd: {exc.strerror}\n")
            return False
        return True


def unset(environment: Environment, name: Optional[str]) -> int:
    """Remove the variable called ``name``, if there is one."""
    if name is not None:
        environment.unset(name)
    return 0


def export(
    environment: Environment,
    args: Sequence[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Without arguments list the variables sorted; otherwise set each one.

    Invalid identifiers are reported and skipped; the status is 1 when
    any was reported.
    """
    words: List[str] = list(args[1:])
    if not words:
        target = _stream(out, sys.stdout)
        for line in environment.export_lines():
            target.write(line + "\n")
        return 0
    err = _stream(err, sys.stderr)
    status = 0
    for word in words:
        if not word:
            continue
        try:
            environment.add_or_replace(word)
        except InvalidIdentifierError as exc:
            err.write(f"{exc}\n")
            status = 1
    return status


def exit_builtin(
    args: Sequence[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """Print ``exit`` and raise ShellExit with the status the arguments give."""
    _stream(out, sys.stdout).write("exit\n")
    if len(args) < 2:
        raise ShellExit(0)
    err = _stream(err, sys.stderr)
    argument = args[1]
    if not argument or not is_numeric(argument) or valid_number(argument) != NUMBER_OK:
        err.write(f"exit: {argument}: numeric argument required\n")
        raise ShellExit(2)
    if len(args) > 2:
        err.write("exit: too many arguments\n")
        raise ShellExit(2)
    raise ShellExit(int(argument) % 256)


def run_builtin(
    args: Sequence[str],
    environment: Environment,
    changer: DirectoryChanger,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> Optional[int]:
    """Run ``args`` when it names a builtin; return its status, or None otherwise."""
    if not args:
        return None
    name = args[0]
    if name == "pwd":
        return pwd(out)
    if name == "env":
        return env(environment, out)
    if name == "echo":
        return echo(args, out)
    if name == "cd":
        return changer.cd(args[1] if len(args) > 1 else None, out, err)
    if name == "export":
        return export(environment, args, out, err)
    if name == "unset":
        return unset(environment, args[1] if len(args) > 1 else None)
    if name == "exit":
        exit_builtin(args, out, err)
    return None