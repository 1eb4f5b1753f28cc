"""File commands: read, write, make folders and delete."""

import os
import sys

_BACADONG_USAGE = "Usage: bacadong [--line] <filename>\n"
_BACADONG_HELP = (
    'Usage: bacadong [--line] "<filename with spaces>"\n'
    "Options:\n"
    "  --line     Show file content with line numbers\n"
    "  --h, --help    Show this help message\n"
)


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def _error(prefix, exc):
    sys.stderr.write(f"{prefix}: {exc.strerror or exc}\n")


def number_lines(text):
    """Prefix the first line and every line after a newline with its number."""
    lines = text.split("\n")
    return "\n".join(f"{number:4d} | {line}" for number, line in enumerate(lines, 1))


def write_words(path, words):
    """Write the words joined by spaces and a final newline, replacing the file."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with open(fd, "w", encoding="utf-8", newline="") as fh:
        fh.write(" ".join(words) + "\n")


def bacadong_main(argv=None):
    """Print a file, optionally with line numbers."""
    args = _args(argv)
    if len(args) not in (1, 2):
        sys.stderr.write(_BACADONG_USAGE)
        return 1
    if len(args) == 1 and args[0] in ("--h", "--help"):
        sys.stdout.write(_BACADONG_HELP)
        return 0

    show_lines = False
    filename = None
    if len(args) == 2 and args[0] == "--line":
        show_lines, filename = True, args[1]
    elif len(args) == 1:
        filename = args[0]

    if filename is None:
        sys.stderr.write("Invalid filename.\n")
        return 1

    try:
        with open(filename, encoding="utf-8", errors="replace", newline="") as fh:
            content = fh.read()
    except OSError as exc:
        _error("open", exc)
        return 1

    sys.stdout.write(number_lines(content) if show_lines else content)
    sys.stdout.write("\n")
    return 0


def buatdong_main(argv=None):
    """Write the given words into a file."""
    args = _args(argv)
    if len(args) < 2:
        sys.stderr.write("Usage: buatdong <filename> <content>\n")
        return 1
    try:
        write_words(args[0], args[1:])
    except OSError as exc:
        _error("open", exc)
        return 1
    sys.stdout.write("Buset bisa dong.\n")
    return 0


def buatfolder_main(argv=None):
    """Create one folder."""
    args = _args(argv)
    if len(args) != 1:
        sys.stderr.write("Usage: buatfolder <folder_name>\n")
        return 1
    folder = args[0]
    try:
        os.mkdir(folder, 0o755)
    except OSError as exc:
        _error("mkdir failed", exc)
        return 1
    sys.stdout.write(f"Folder '{folder}' created successfully.\n")
    return 0


def hapusdong_main(argv=None):
    """Delete a file or an empty folder."""
    args = _args(argv)
    if len(args) != 1:
        sys.stderr.write("Usage: hapusdong <file_to_delete>\n")
        return 1
    filename = args[0]
    try:
        if os.path.isdir(filename) and not os.path.islink(filename):
            os.rmdir(filename)
        else:
            os.remove(filename)
    except OSError as exc:
        _error("Error deleting file", exc)
        return 1
    sys.stdout.write(f"File '{filename}' udah dihapus.\n")
    return 0