# pipex

`pipex` behaves like the shell construct

```sh
< infile cmd1 | cmd2 > outfile
```

It opens `infile` for reading, feeds it to the first command, pipes that
command's output into the second command, and writes the second command's
output to `outfile`, which is created (mode `0777`, subject to the umask) or
truncated.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same entry point can be run as `python -m pipex.pipeline`.

Exactly four arguments are required; with any other number, a usage message
is written to standard error and the exit status is 255. Otherwise the exit
status is 0, whatever the two commands return.

Each command is split on spaces, with runs of spaces treated as one. The
first word is used as a path if a file of that name exists; otherwise it is
looked up, in order, in the directories listed in `PATH`. For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Each side of the pipe fails on its own, writing a message to standard error
while the other side still runs:

- a command made only of spaces: `Empty commands.`
- an input or output file that cannot be opened: `OPEN FAILED: <reason>`
- a program found neither as given nor in `PATH`: `INVALID PATH: No such file or directory`
- a program that cannot be started: `EXECVE FAILED: <reason>`

## Library use

```python
import os
from pipex.pipeline import run_pipeline, find_executable, parse_command, is_blank_command

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
# (status of grep, status of wc); a side that failed to start reports
# 1, or 255 for an empty command

parse_command("ls -l  /tmp")              # ['ls', '-l', '/tmp']
find_executable("ls", dict(os.environ))   # e.g. '/bin/ls', or None if not found
is_blank_command("   ")                   # True
```

`run_pipeline` takes `env=None` to mean the current environment. It does not
raise for a failing side; it writes the message to standard error and
returns that side's status in place of the command's. `parse_command` raises
`pipex.pipeline.PipexError` (with `status` 255) for a command with no words.
`PipexError` carries `message` and `status`.

### Helpers

- `pipex.strings`: `split(s, sep)` (empty pieces dropped), `trim(s, chars)`,
  `strncmp(a, b, n)`, `strnstr(haystack, needle, length)`,
  `substr(s, start, length)`.
- `pipex.chars`: `atoi`, `itoa`, `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_upper`, `to_lower`. The classifiers and case
  mappings accept a one-character string or an integer code.
- `pipex.printf`: `render(fmt, *args)` returns the formatted text and
  `printf(fmt, *args)` writes it to standard output and returns its length.
  Supported conversions are `%c %s %d %i %u %x %X %p %%`; unknown
  conversions produce nothing, a trailing lone `%` raises `ValueError`, and
  too few arguments raise `TypeError`. `%s` of `None` gives `(null)` and
  `%p` of `None` or 0 gives `(nil)`.
- `pipex.lines`: `LineReader(source, buffer_size=3)` reads an open file
  descriptor or any object with `read(size)`, text or binary, in chunks of
  `buffer_size`. `read_line()` returns the next line with its trailing
  newline (the last may lack one), or `None` at the end; iterating the
  reader yields the lines.

## Limits

- Exactly two commands are joined; there is no support for longer chains
  or for here-documents.
- Commands are not parsed by a shell: no quoting, escapes, globbing,
  variables or redirections inside a command.

## Tests

```sh
pip install ".[test]"
pytest
```