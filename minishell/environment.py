"""The shell's environment: an ordered list of named variables."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union

from minishell.chars import isalnum, isalpha


class InvalidIdentifierError(ValueError):
    """Raised when an export argument does not start with a valid name."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"minishell: export: {word}': not a valid identifier")


@dataclass
class EnvVar:
    """One variable; ``value`` is None for a name exported without a value."""

    name: str
    value: Optional[str] = None


def is_valid_identifier(word: str) -> bool:
    """Return True when the part of ``word`` before any '=' is a valid name."""
    if not word:
        return False
    first = word[0]
    if not (isalpha(first) or first == "_"):
        return False
    name = word.partition("=")[0]
    return all(isalnum(ch) or ch == "_" for ch in name[1:])


class Environment:
    """Variables kept in the order they were first added."""

    def __init__(self, variables: Optional[Iterable[EnvVar]] = None) -> None:
        self._vars: List[EnvVar] = list(variables or [])

    @classmethod
    def from_envp(cls, envp: Union[Iterable[str], Mapping]) -> "Environment":
        """Build from ``NAME=VALUE`` strings (entries without '=' are skipped) or a mapping."""
        environment = cls()
        if isinstance(envp, Mapping):
            for name, value in envp.items():
                environment.add(str(name), str(value))
            return environment
        for entry in envp:
            name, sep, value = entry.partition("=")
            if sep:
                environment.add(name, value)
        return environment

    def add(self, name: str, value: Optional[str]) -> EnvVar:
        """Append a variable at the end, without looking for an existing one."""
        variable = EnvVar(name, value)
        self._vars.append(variable)
        return variable

    def find(self, name: str) -> Optional[EnvVar]:
        """Return the first variable called ``name``, or None."""
        return next((var for var in self._vars if var.name == name), None)

    def unset(self, name: str) -> bool:
        """Remove the first variable called ``name``; return whether one was removed."""
        for index, var in enumerate(self._vars):
            if var.name == name:
                del self._vars[index]
                return True
        return False

    def add_or_replace(self, assignment: str) -> EnvVar:
        """Apply ``NAME`` or ``NAME=VALUE``.

        An existing variable gets the new value, which is None when the
        assignment has no '='. Otherwise a new variable is appended.
        """
        if not is_valid_identifier(assignment):
            raise InvalidIdentifierError(assignment)
        name, sep, rest = assignment.partition("=")
        value = rest if sep else None
        found = self.find(name)
        if found is not None:
            found.value = value
            return found
        return self.add(name, value)

    def env_lines(self) -> List[str]:
        """Lines as the env builtin prints them, in insertion order."""
        return [
            var.name if var.value is None else f"{var.name}={var.value}"
            for var in self._vars
        ]

    def export_lines(self) -> List[str]:
        """Lines as export without arguments prints them, sorted by ``NAME=VALUE``."""
        entries = sorted(
            var.name if var.value is None else f"{var.name}={var.value}"
            for var in self._vars
        )
        lines = []
        for entry in entries:
            name, sep, value = entry.partition("=")
            if sep:
                lines.append(f'declare -x {name}="{value}"')
            else:
                lines.append(f"declare -x {name}")
        return lines

    def clear(self) -> None:
        """Remove every variable."""
        self._vars.clear()

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)