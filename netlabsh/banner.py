"""Banner, help listing, the print command and the clear command."""

import os
import sys

_ART_ROWS = (
    r" _____ _____  ___  ______________ _   _ _         _____ ",
    r"|  _  /  ___| |  \/  |  _  |  _  \ | | | |       |  _  |",
    r"| | | \ `--.  | .  . | | | | | | | | | | |       | |_| |",
    r"| | | |`--. \ | |\/| | | | | | | | | | | |       \____ |",
    r"\ \_/ /\__/ / | |  | \ \_/ / |/ /| |_| | |____  .___/ /",
    r" \___/\____/  \_|  |_/\___/|___/  \___/\_____/  \____/ ",
)

_HINTS = (("help", "to see the list of commands"), ("exit", "to quit the shell"))

_DESCRIBED_COMMANDS = (
    ("print {something}", "Print something"),
    ("exit", "Exit the shell"),
    ("help", "Show all commands in shell"),
    ("itungwoi {add|sub|mul|div} num1 num2", "Do some Calculation"),
    ("buatdong {filename} {content}", "Write to a file"),
    ("bacadong {filename}", "Read from a file"),
    ("rahasiabanget {filename}", "Write to a file (encrypted)"),
    ("bacapikiran {filename}", "Read from a file (encrypted)"),
)

_ARCHIVE_USAGE = "kompres {filename} {file1} {file2} {file...}"

_SHORT_COMMANDS = (
    ("lihat", "ls direktori"),
    ("dimana", "kayak pwd"),
    ("hapusdong", "menghapus file"),
    ("bukain", "unzip file"),
    ("bersihindong", "bersihin terminal"),
)

_PRINT_FORMS = (
    ("./print", "prints 'Hello from print!'"),
    ("./print <text>", "prints the provided text"),
    ("./print --dir", "prints current working directory"),
    ("./print --h or --help", "shows this help message"),
)

_CLEAR_SCREEN = "\033[2J\033[H"


def _build_landing_page():
    art = "".join(f"{row}\n" for row in _ART_ROWS)
    hints = "".join(f'Type "{word}" {what}\n' for word, what in _HINTS)
    return f"{art}\n{hints}"


def _build_help_text():
    lines = ["-Use the shell at your own risk...", "List of Commands supported:"]
    lines.extend(f">{usage} : {what}" for usage, what in _DESCRIBED_COMMANDS)
    lines.append(f">{_ARCHIVE_USAGE}")
    lines.extend(f">{name}: {what}" for name, what in _SHORT_COMMANDS)
    return "".join(f"{line}\n" for line in lines)


def _build_print_usage():
    forms = "".join(f"  {usage:<23}-> {what}\n" for usage, what in _PRINT_FORMS)
    return f"Usage:\n{forms}"


_LANDING_PAGE = _build_landing_page()
_HELP_TEXT = _build_help_text()
_PRINT_USAGE = _build_print_usage()


def landing_page():
    """Return the shell's welcome banner."""
    return _LANDING_PAGE


def help_text():
    """Return the list of supported commands."""
    return _HELP_TEXT


def print_output(args):
    """Return what the print command writes for ``args``."""
    args = list(args)
    if not args:
        return "Hello from print!\n"
    if args[0] in ("--h", "--help"):
        return _PRINT_USAGE
    if args[0] == "--dir":
        return f"Current Directory: {os.getcwd()}\n"
    return "".join(f"ini di print: {arg} " for arg in args) + "\n"


def print_main(argv=None):
    """Run the print command."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        sys.stdout.write(print_output(args))
    except OSError as exc:
        sys.stderr.write(f"getcwd failed: {exc.strerror or exc}\n")
        return 1
    return 0


def clear_main(argv=None):
    """Clear the terminal and show the banner again."""
    sys.stdout.write(_CLEAR_SCREEN)
    sys.stdout.write(landing_page() + "\n")
    sys.stdout.flush()
    return 0