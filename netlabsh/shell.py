"""Interactive shell that dispatches to the netlab commands."""

import io
import shlex
import signal
import subprocess
import sys
import threading
from contextlib import redirect_stdout
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .archive import bukain_main, bungkus_main, dimana_main, lihat_main
from .banner import clear_main, help_text, landing_page, print_main
from .caesar import bacapikiran_main, rahasiabanget_main
from .calc import main as itungwoi_main
from .files import bacadong_main, buatdong_main, buatfolder_main, hapusdong_main

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platform without readline
    _readline = None

_INTERRUPT_MESSAGE = "\nbro masih menggunakan CTRL+C, ketik 'exit' buat keluar: Yo\n"
_SUSPEND_MESSAGE = "\nShell tidak bisa di-suspend pakai Ctrl+Z! Gurt\n"

_Program = Callable[[List[str]], int]


def _help_main(argv=None):
    sys.stdout.write(help_text() + "\n")
    return 0


# Every program the shell knows, by the name it is reached with inside a pipeline.
_PROGRAMS: Dict[str, _Program] = {
    "print": print_main,
    "buatdong": buatdong_main,
    "bacadong": bacadong_main,
    "rahasiabanget": rahasiabanget_main,
    "bacapikiran": bacapikiran_main,
    "itungwoi": itungwoi_main,
    "bungkus": bungkus_main,
    "buatfolder": buatfolder_main,
    "lihat": lihat_main,
    "dimana": dimana_main,
    "hapusdong": hapusdong_main,
    "printHelp": _help_main,
    "bukain": bukain_main,
    "bersihindong": clear_main,
}

# Commands typed at the prompt that take space-separated words, with the
# greatest number of words each one passes on.
_WORD_LIMITS: Dict[str, int] = {
    "print": 98,
    "buatdong": 254,
    "rahasiabanget": 254,
    "bacapikiran": 254,
    "itungwoi": 254,
    "bungkus": 254,
    "lihat": 254,
    "dimana": 254,
    "hapusdong": 254,
    "bukain": 2,
    "bersihindong": 2,
}


def _words(text, separators=" "):
    """Split like strtok: runs of separators delimit, empty pieces vanish."""
    pieces = [text]
    for sep in separators:
        pieces = [part for piece in pieces for part in piece.split(sep)]
    return [piece for piece in pieces if piece]


def split_pipeline(line):
    """Split ``a | b`` into the argument lists of its two sides."""
    sides = _words(line, "|")
    if len(sides) < 2:
        raise ValueError("a pipeline needs a command on each side of '|'")
    left, right = _words(sides[0], " \n"), _words(sides[1], " \n")
    if not left or not right:
        raise ValueError("a pipeline needs a command on each side of '|'")
    return left, right


def _remember(line):
    if _readline is not None:
        _readline.add_history(line)


@dataclass
class Shell:
    """Read commands at a prompt and run them."""

    input_func: Callable[[str], str] = input
    prompt: str = "netlab>> "

    def run_line(self, line):
        """Run one line; return False when the shell should stop."""
        if "|" in line:
            try:
                left, right = split_pipeline(line)
            except ValueError as exc:
                sys.stderr.write(f"{exc}\n")
                return True
            self._run_pipeline(left, right)
            return True
        if not line:
            return True

        _remember(line)
        words = _words(line)
        if not words:
            return True
        name, rest = words[0], words[1:]

        if name == "exit":
            return False
        if name == "bacadong":
            self._bacadong(line)
        elif name == "buatfolder":
            buatfolder_main(rest[:1])
        elif name == "help":
            _help_main()
        elif name in _WORD_LIMITS:
            _PROGRAMS[name](rest[: _WORD_LIMITS[name]])
        else:
            self._system(line)
        return True

    def run(self):
        """Show the banner and read commands until ``exit`` or end of input."""
        previous = self._install_suspend_handler()
        try:
            sys.stdout.write(landing_page() + "\n")
            while True:
                try:
                    line = self.input_func(self.prompt)
                except KeyboardInterrupt:
                    sys.stdout.write(_INTERRUPT_MESSAGE)
                    continue
                except EOFError:
                    sys.stdout.write("\n")
                    break
                if not line:
                    continue
                if not self.run_line(line):
                    break
        finally:
            self._restore_suspend_handler(previous)
        return 0

    @staticmethod
    def _install_suspend_handler():
        if not hasattr(signal, "SIGTSTP"):
            return None
        if threading.current_thread() is not threading.main_thread():
            return None

        def on_suspend(signum, frame):
            sys.stdout.write(_SUSPEND_MESSAGE)
            sys.stdout.flush()

        return signal.signal(signal.SIGTSTP, on_suspend)

    @staticmethod
    def _restore_suspend_handler(previous):
        if previous is not None:
            signal.signal(signal.SIGTSTP, previous)

    @staticmethod
    def _bacadong(line):
        stripped = line.lstrip(" ")
        rest = stripped[len("bacadong") + 1:]
        try:
            args = shlex.split(rest)
        except ValueError as exc:
            sys.stderr.write(f"bacadong: {exc}\n")
            return
        bacadong_main(args)

    @staticmethod
    def _system(line):
        sys.stdout.flush()
        subprocess.run(line, shell=True)

    def _run_pipeline(self, left, right):
        text = self._capture(left)
        self._feed(right, text)

    @staticmethod
    def _capture(argv):
        name, args = argv[0], argv[1:]
        program = _PROGRAMS.get(name)
        if program is not None:
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                program(args)
            return buffer.getvalue()
        try:
            completed = subprocess.run(
                [f"./{name}", *args], stdout=subprocess.PIPE, text=True
            )
        except OSError as exc:
            sys.stderr.write(f"exec1 failed: {exc.strerror or exc}\n")
            return ""
        return completed.stdout

    @staticmethod
    def _feed(argv, text):
        name, args = argv[0], argv[1:]
        program = _PROGRAMS.get(name)
        if program is not None:
            saved = sys.stdin
            sys.stdin = io.StringIO(text)
            try:
                program(args)
            finally:
                sys.stdin = saved
            return
        sys.stdout.flush()
        try:
            subprocess.run([f"./{name}", *args], input=text, text=True)
        except OSError as exc:
            sys.stderr.write(f"exec2 failed: {exc.strerror or exc}\n")


def main(argv=None):
    """Start the interactive shell."""
    return Shell().run()