# minishell

A small interactive shell that reads one line at a time, checks it for
quoting and operator syntax errors, and runs a set of built-in commands
against its own copy of the environment.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
minishell
```

The prompt is `minishell : `. Each line is split on spaces (empty pieces
are dropped) and the first word picks a built-in command. Blank lines are
ignored. End of input (Ctrl-D) leaves the shell with status 0. A line with
an unclosed single or double quote ends the shell with status 1. Line
editing and history come from Python's `readline` module where it is
available.

## Built-in commands

| Command | What it does |
| --- | --- |
| `echo [-n] words...` | Prints the words separated by single spaces; a first word of exactly `-n` drops the trailing newline. |
| `pwd` | Prints the current working directory. |
| `cd [path]` | Changes directory. With no path it goes to `HOME` as it was when the shell started (printing `HOME not set` if there was none); `-` prints the previous directory and goes back to it (`oldpwd not set` if there is none). |
| `env` | Prints every variable in the order it was added, as `NAME=value`, or just `NAME` when it has no value. |
| `export` | With no arguments, lists the variables sorted by `NAME=value`, as `declare -x NAME="value"` (or `declare -x NAME`). |
| `export NAME[=value]...` | Adds or replaces each variable. `NAME` alone sets the value to none. A name must start with a letter or `_` and hold only letters, digits and `_`; invalid ones are reported on standard error and skipped, and the status is then 1. |
| `unset NAME` | Removes the variable if it exists. |
| `exit [n]` | Prints `exit` and leaves with status `n` modulo 256 (0 without `n`). A value that is not a signed decimal within the 32-bit integer range gives `numeric argument required` and status 2; more than one argument gives `too many arguments` and status 2. |

## Syntax checks

After a command has run, the line is checked for misplaced operators
(`|`, `&`, `;`, `>`, `<`): a line that starts with one, ends with one
(trailing spaces ignored), or has two side by side is reported on standard
error, and the shell carries on. Operators between single or double quotes
are not counted; `$` between single quotes is hidden as well.

## What it does not do

- It runs nothing but the built-in commands above. A line whose first word
  is not a built-in does nothing; no other programs are started.
- Pipes, redirections, `&&`, `;` and other operators are only checked for
  syntax, never carried out.
- There is no variable expansion and no quote removal: words are split on
  spaces exactly as typed, quotes included.
- Changes to the shell's environment are not passed on anywhere; `cd`
  reads `HOME` from the environment the shell was started with.

## Using it as a library

- `minishell.shell.Shell(environ=None, out=None, err=None)` runs lines one
  by one with `run_line` (returning the built-in's status, raising
  `ShellSyntaxError` for unclosed quotes and `ShellExit` from `exit`), or a
  whole sequence of lines with `run`, which returns the exit status.
  `minishell.shell.main()` starts the interactive session.
- `minishell.environment.Environment` keeps `EnvVar(name, value)` entries
  in insertion order, with `from_envp` (a list of `NAME=VALUE` strings or a
  mapping), `add`, `find`, `unset`, `add_or_replace`, `env_lines`,
  `export_lines` and `clear`. `add_or_replace` raises
  `InvalidIdentifierError`; `is_valid_identifier` checks a name.
- `minishell.syntax` provides `is_special_char`, `check_quotes_closed`,
  `check_special_chars`, `check_pipe`, `neutralize_single_quoted`,
  `neutralize_double_quoted` and `restore_neutralized`; problems are raised
  as `ShellSyntaxError`.
- `minishell.builtins` has one function per built-in (`pwd`, `env`,
  `echo`, `export`, `unset`, `exit_builtin`), `DirectoryChanger.cd`, the
  number checks `is_numeric` and `valid_number`, and `run_builtin`, which
  dispatches a split command line and returns None for anything that is
  not a built-in.
- Smaller helpers: `minishell.chars` (ASCII classification and case
  conversion), `minishell.cstring` (C-style string routines such as
  `atoi`, `split`, `strcmp`, `substr`, `strlcpy`), `minishell.memory`
  (byte-buffer routines such as `memchr`, `memcmp`, `memmove`, `calloc`)
  and `minishell.output` (`put_char`, `put_str`, `put_endl`, `put_nbr`).