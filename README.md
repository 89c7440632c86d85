# pipex

`pipex` is a small Python library with the building blocks for running a
command line the way a shell pipeline does: splitting a command string into
its arguments and finding the executable a command name refers to. It also
ships a set of small helpers with C-string semantics for characters,
numbers, strings and output.

## Installation

    pip install .

With the test dependencies:

    pip install ".[test]"

## Splitting command lines

`pipex.splitting.split_command` turns a command string into a list of
arguments:

    from pipex.splitting import split_command

    split_command("grep banana")          # ['grep', 'banana']
    split_command("awk '{print $1}'")     # ['awk', '{print $1}']

Rules:

- Words are separated by spaces and newlines.
- Single or double quotes keep a word together; a backslash inside quotes
  escapes the next character.
- A word wholly enclosed in one kind of quote loses the quotes.
- Words made only of spaces, tabs and newlines are dropped.
- Each backslash is then replaced by the character it escapes.

An empty list means the string holds no command at all.

The module also exposes the pieces it is built from: `count_words`,
`remove_backslashes`, `drop_blank`, and `is_script`, which is true when a
command name contains `.sh`.

## Finding executables

`pipex.paths.get_path` returns the file to run for a command name, or
`None` when it cannot be found:

    from pipex.paths import get_path

    get_path("ls", {"PATH": "/usr/bin:/bin"})   # e.g. '/usr/bin/ls'
    get_path("./script.sh")                      # './script.sh'

- A command starting with `.` or `/` is returned unchanged.
- Otherwise the directories in `PATH` are searched in order
  (`search_dirs`), checking that the file exists (`locate`).
- An empty environment falls back to `/usr/bin:/bin`
  (`pipex.paths.DEFAULT_PATH`); an environment without `PATH`, or with an
  empty one, searches nowhere.
- The environment defaults to the process environment.

## C-style helpers

The `pipex.libft` sub-package holds helpers that follow C-string rules: a
string ends at its first NUL character, and searches return an index or
`None`.

- `pipex.libft.charclass`: `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `tolower`, `toupper` for ASCII characters or integer codes.
- `pipex.libft.numbers`: `atoi` and `atol` (lenient parsing, wrapping at
  32 and 64 bits), `atof`, and `itoa`.
- `pipex.libft.search`: `strlen`, `strchr`, `strrchr`, `strcmp`,
  `strncmp`, `strdup`, `strndup`, `strnstr`, `substr`.
- `pipex.libft.transform`: `split`, `striteri`, `strmapi`, `strjoin`,
  `strlcpy`, `strlcat`, `strtrim`, `read_line`, `remove_newline`.
- `pipex.libft.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `put_nbr_unsigned`, `put_nbr_base`, `put_ptr`, writing to a file
  descriptor or a binary stream and returning the number of bytes written.

Examples:

    from pipex.libft.numbers import atoi
    from pipex.libft.transform import split, strtrim

    atoi("  -42abc")          # -42
    split("a::b", ":")        # ['a', 'b']
    strtrim("  hi  ", " ")    # 'hi'

## What this package does not do

The package does not run commands. It has no command-line program, no
pipeline runner that connects two commands between an input file and an
output file, no handling of input and output redirection or exit statuses,
and no special treatment of `/dev/urandom`. It provides only the splitting,
lookup and helper functions described above; starting the processes is left
to the caller, for example with `subprocess`.

## Running the tests

    pytest