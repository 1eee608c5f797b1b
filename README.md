# minishell

Building blocks for the front end of a small Bash-like shell. The
package splits a command line into tokens, expands `$VARIABLES` under
shell quoting rules, collects here-document bodies, and keeps its own
copy of the environment together with the last exit status. A handful
of small string, character, output and line-reading helpers come with it.

## Modules

| Module | Contents |
| --- | --- |
| `minishell.models` | `Token`, `TokenType`, `Command`, `Redirection`, `RedirType` |
| `minishell.env` | `Shell` (environment copy, last exit status), `is_whitespace` |
| `minishell.lexer` | `lex(line, shell)`, `LexerError` |
| `minishell.expander` | `expand_string(text, shell)`, `expand_variables(commands, shell)` |
| `minishell.heredoc` | `process_heredocs(commands, shell, read_line=None)`, `HeredocAborted` |
| `minishell.report` | `format_commands(commands)` |
| `minishell.strings` | `split`, `strtrim`, `strnstr`, `strncmp`, `strcmp`, `substr`, `strchr`, `strrchr`, `strmapi` |
| `minishell.charclass` | `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `is_space`, `to_lower`, `to_upper` |
| `minishell.conversions` | `atoi`, `itoa` |
| `minishell.printf` | `sprintf`, `printf`, `to_base` |
| `minishell.output` | `put_char`, `put_str`, `put_endl`, `put_nbr` (write to a file descriptor) |
| `minishell.linereader` | `LineReader`, `get_next_line` |

## Shell state and the environment

```python
from minishell.env import Shell

shell = Shell.from_environment(["HOME=/home/alice", "USER=alice"])

shell.get_env_value("USER")     # 'alice'
shell.get_env_value("MISSING")  # ''  (unknown names give an empty string)
shell.get_env_value("?")        # '0' (the last exit status)

shell.set_env_var("EDITOR", "vi")  # replaces the entry in place, or appends it
```

`Shell.from_environment` also takes a mapping, and with no argument it
copies the process environment. `is_whitespace(text)` is true for `None`,
an empty string, or a string of whitespace only.

## Tokenising a line

```python
from minishell.lexer import lex, LexerError

tokens = lex("cat < in.txt | grep x >> out.txt", shell)
[t.value for t in tokens]
# ['cat', '<', 'in.txt', '|', 'grep', 'x', '>>', 'out.txt']
```

Words and the operators `|`, `<`, `>`, `<<` and `>>` become `Token`
objects. Quotes stay inside word values. An unclosed quote, or one of
`&`, `;`, `(` or `)`, raises `LexerError`; its `exit_status` is 258 and
the shell's `last_exit_status` is set to the same value.

## Expanding variables

```python
from minishell.expander import expand_string

expand_string("echo \"$USER\" '$USER'", shell)  # 'echo alice $USER'
```

Nothing is expanded inside single quotes; double quotes still expand; all
quote characters are removed. `$?` becomes the last exit status, `$`
followed by a digit is dropped together with the digit, and a `$`
followed by anything else is kept.

`expand_variables(commands, shell)` applies this in place to every
argument and redirection target of a list of `Command` objects, leaving
heredoc delimiters as they are.

## Here-documents

`process_heredocs(commands, shell, read_line)` reads the body of the last
`<<` redirection of each command, calling `read_line(">")` for each line
until a line equals the delimiter. Lines are expanded when the
redirection's `expand_heredoc_content` is true. The collected text is made
available as a readable file descriptor in `command.heredoc_fd`.
`read_line` returning `None` (end of input) raises `HeredocAborted` with
exit status 1; a `KeyboardInterrupt` from it raises `HeredocAborted` with
exit status 130. Without `read_line`, lines are read with `input()`.

## Showing a command list

`format_commands(commands)` returns a readable listing of each command's
arguments and redirections, or `"-> Parser returned NULL\n"` for an
empty list.

## Formatted output and line reading

```python
from minishell.printf import sprintf

sprintf("%s has %d items (%x)", "list", 42, 255)  # 'list has 42 items (ff)'
```

The conversions are `%c`, `%s`, `%d`, `%i`, `%u`, `%p`, `%x`, `%X` and
`%%`; `printf` writes the same text to standard output and returns the
number of bytes written.

`LineReader(fd)` reads a file descriptor line by line (lines keep their
newline) and can be iterated; `get_next_line(fd)` does the same with one
buffer kept per descriptor.

## What this package does not do

There is no parser here that turns a token list into `Command` objects:
build `Command` and `Redirection` values yourself to use the expander,
heredoc and report functions. Nothing is executed — there is no command
runner, no pipes between processes, no built-in commands, no interactive
prompt and no `minishell` command to run.