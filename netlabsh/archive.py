"""Commands that hand work over to zip, unzip, ls and pwd."""

import subprocess
import sys
from itertools import takewhile

_BUNGKUS_USAGE = "Usage: bungkus <archive_name.zip> <file1> [file2 ...] [--flag]\n"
_BUNGKUS_HELP = (
    _BUNGKUS_USAGE
    + "Flags:\n"
    "  --help, -h     Show this help message\n"
    "  --verbose      Show zip output in detail\n"
    "  --quiet        Suppress most of the output\n"
)


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def _run(command):
    """Run a command and wait for it; report a failure to start."""
    try:
        subprocess.run(command)
    except OSError as exc:
        sys.stderr.write(f"exec failed: {exc.strerror or exc}\n")
    return 0


def zip_arguments(args):
    """Build the zip command line: leading names, then -v/-q from the flags."""
    args = list(args)
    if len(args) < 2:
        raise ValueError("an archive name and at least one file are required")
    names = list(takewhile(lambda arg: not arg.startswith("--"), args))
    flags = args[len(names):]
    command = ["zip", *names]
    if "--verbose" in flags:
        command.append("-v")
    if "--quiet" in flags:
        command.append("-q")
    return command


def unzip_arguments(args):
    """Build the unzip command line, with -d when a destination is given."""
    args = list(args)
    if not args:
        raise ValueError("a zip file is required")
    command = ["unzip", args[0]]
    if len(args) >= 2:
        command += ["-d", args[1]]
    return command


def bungkus_main(argv=None):
    """Pack files into a zip archive."""
    args = _args(argv)
    if len(args) < 2:
        sys.stderr.write(_BUNGKUS_USAGE)
        return 1
    if args[0] in ("--help", "-h"):
        sys.stdout.write(_BUNGKUS_HELP)
        return 0
    return _run(zip_arguments(args))


def bukain_main(argv=None):
    """Unpack a zip archive."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: bukain <zip_file> [destination_folder]\n")
        return 1
    return _run(unzip_arguments(args))


def lihat_main(argv=None):
    """List a directory."""
    return _run(["ls", *_args(argv)])


def dimana_main(argv=None):
    """Print the working directory."""
    return _run(["pwd", *_args(argv)])