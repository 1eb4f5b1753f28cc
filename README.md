# netlabsh

A small interactive shell with a handful of built-in commands for working
with files, a shift-by-three letter cipher, a four-function calculator and
zip archives. Any line it does not recognise is handed to the system
shell. A `|` joins two commands so that the second one receives what the
first one printed.

## Installing

```
pip install .
```

## Starting the shell

```
netlabsh
```

It shows a banner and then the prompt `netlab>> `. Type `help` for the
list of commands and `exit` to leave. End of input (Ctrl+D) also leaves.
Pressing Ctrl+C at the prompt prints a reminder to use `exit` and keeps
the shell running. Where the platform has Ctrl+Z suspension, the shell
prints a message and is not suspended.

## Built-in commands

| Command | What it does |
|---|---|
| `print [text...]` | With no words prints `Hello from print!`; otherwise prints each word after `ini di print:`. `--dir` prints the working directory and `--h`/`--help` shows usage |
| `itungwoi {add\|sub\|mul\|div} num1 num2` | Calculates in single precision and prints the result to two decimals |
| `buatdong <file> <content...>` | Writes the words, joined by spaces and ending in a newline, to the file and replaces what was there |
| `bacadong [--line] <file>` | Shows a file. `--line` numbers the lines. Quote a file name that has spaces in it |
| `rahasiabanget <file> <text...>` | Writes the text to a file with every ASCII letter shifted three places forward |
| `bacapikiran <file>` | Shows a file with every ASCII letter shifted three places back |
| `buatfolder <name>` | Creates a directory |
| `hapusdong <path>` | Deletes a file or an empty directory |
| `lihat [args]` | Runs `ls` with the arguments |
| `dimana [args]` | Runs `pwd` with the arguments |
| `bungkus <archive.zip> <files...> [--verbose] [--quiet]` | Runs `zip`. `--verbose` adds `-v` and `--quiet` adds `-q`. `-h`/`--help` shows usage |
| `bukain <archive.zip> [folder]` | Runs `unzip`, extracting into the folder when one is given |
| `bersihindong` | Clears the screen and shows the banner again |
| `help` | Shows the command list |

Commands with a line such as `a | b` run the built-in programs inside the
shell. Inside a pipeline the command list is named `printHelp`. Any other
name on either side of the `|` is run as `./<name>` from the current
directory.

## The calculator on its own

```
itungwoi add 1.5 2
3.50
```

It exits with status 1 and an error message when:

* the number of arguments is wrong
* the operation is unknown
* an argument is not a number. Only the literal `0` is accepted as zero
* the command divides by zero

## Using it from Python

```python
from netlabsh.caesar import encrypt, decrypt
from netlabsh.calc import calculate, parse_number, Operation
from netlabsh.files import number_lines
from netlabsh.archive import zip_arguments
from netlabsh.shell import split_pipeline

encrypt("Hello")                        # 'Khoor'
decrypt("Khoor")                        # 'Hello'
calculate(Operation.MUL, 2.0, 3.0)      # 6.0
parse_number("2.5")                     # 2.5
number_lines("a\nb")                    # '   1 | a\n   2 | b'
zip_arguments(["out.zip", "a.txt", "--quiet"])  # ['zip', 'out.zip', 'a.txt', '-q']
split_pipeline("print hi | bacadong x") # (['print', 'hi'], ['bacadong', 'x'])
```

Each command also has a function that takes its argument list and returns
an exit status. Examples are `netlabsh.files.buatdong_main` and
`netlabsh.caesar.bacapikiran_main`.

## What it does not do

* There is no output redirection and no job control.
* Only one `|` is used per line. Anything after a second `|` is ignored.
* `bungkus`, `bukain`, `lihat` and `dimana` need the `zip`, `unzip`,
  `ls` and `pwd` programs to be installed.
* The cipher only changes ASCII letters. It is not encryption in any
  real sense.

## Running the tests

```
pip install .[test]
pytest
```