import pytest

from netlabsh.banner import help_text, landing_page
from netlabsh.shell import Shell, split_pipeline


def _feeder(lines):
    items = iter(lines)

    def read(prompt):
        try:
            item = next(items)
        except StopIteration:
            raise EOFError
        if isinstance(item, BaseException):
            raise item
        return item

    return read


def test_split_pipeline_basic():
    assert split_pipeline("print a | print b") == (["print", "a"], ["print", "b"])


def test_split_pipeline_skips_leading_bar():
    assert split_pipeline("|lihat|dimana") == (["lihat"], ["dimana"])


@pytest.mark.parametrize("line", ["print a |", "| print a", "  |  "])
def test_split_pipeline_needs_two_sides(line):
    with pytest.raises(ValueError):
        split_pipeline(line)


def test_print_with_words(capsys):
    assert Shell().run_line("print hello") is True
    assert capsys.readouterr().out == "ini di print: hello \n"


def test_print_without_words(capsys):
    Shell().run_line("print")
    assert capsys.readouterr().out == "Hello from print!\n"


def test_print_word_limit(capsys):
    line = "print " + " ".join(f"w{n}" for n in range(120))
    Shell().run_line(line)
    assert capsys.readouterr().out.count("ini di print:") == 98


def test_exit_stops():
    assert Shell().run_line("exit") is False


def test_blank_line_does_nothing(capsys):
    assert Shell().run_line("    ") is True
    assert capsys.readouterr().out == ""


def test_help(capsys):
    Shell().run_line("help")
    assert capsys.readouterr().out == help_text() + "\n"


def test_buatdong_then_bacadong(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    shell = Shell()
    shell.run_line("buatdong notes.txt halo dunia")
    assert (tmp_path / "notes.txt").read_text() == "halo dunia\n"
    capsys.readouterr()
    shell.run_line("bacadong notes.txt")
    assert capsys.readouterr().out == "halo dunia\n\n"


def test_bacadong_quoted_filename(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a b.txt").write_text("isi")
    Shell().run_line('bacadong "a b.txt"')
    assert capsys.readouterr().out == "isi\n"


def test_bacadong_unbalanced_quote(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert Shell().run_line('bacadong "open') is True
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("bacadong:")


def test_buatfolder_without_name(capsys):
    Shell().run_line("buatfolder")
    assert capsys.readouterr().err == "Usage: buatfolder <folder_name>\n"


def test_buatfolder_uses_first_word_only(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert Shell().run_line("buatfolder first second") is True
    assert capsys.readouterr().out == "Folder 'first' created successfully.\n"
    assert (tmp_path / "first").is_dir()
    assert not (tmp_path / "second").exists()


def test_secret_round_trip(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    shell = Shell()
    shell.run_line("rahasiabanget s.txt Hello there")
    assert (tmp_path / "s.txt").read_text() != "Hello there\n"
    capsys.readouterr()
    shell.run_line("bacapikiran s.txt")
    assert capsys.readouterr().out == "Hello there\n"


def test_itungwoi(capsys):
    Shell().run_line("itungwoi add 1 2")
    assert capsys.readouterr().out == "3.00\n"


def test_pipeline_between_programs(capsys):
    Shell().run_line("print hi | print there")
    assert capsys.readouterr().out == "ini di print: there \n"


def test_pipeline_missing_left_program(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    Shell().run_line("nosuchprog | print x")
    captured = capsys.readouterr()
    assert captured.out == "ini di print: x \n"
    assert "exec1 failed" in captured.err


def test_pipeline_missing_right_program(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    Shell().run_line("print x | nosuchprog")
    assert "exec2 failed" in capsys.readouterr().err


def test_unknown_command_goes_to_system_shell(capfd):
    Shell().run_line("echo shellword")
    assert "shellword" in capfd.readouterr().out


def test_run_shows_banner_and_stops_at_exit(capsys):
    shell = Shell(input_func=_feeder(["", "print hi", "exit", "print never"]))
    assert shell.run() == 0
    out = capsys.readouterr().out
    assert out.startswith(landing_page())
    assert "ini di print: hi" in out
    assert "never" not in out


def test_run_survives_interrupt(capsys):
    shell = Shell(input_func=_feeder([KeyboardInterrupt(), "print after"]))
    assert shell.run() == 0
    out = capsys.readouterr().out
    assert "bro masih menggunakan CTRL+C" in out
    assert out.index("CTRL+C") < out.index("ini di print: after")


def test_run_ends_at_end_of_input(capsys):
    shell = Shell(input_func=_feeder([]))
    assert shell.run() == 0
    assert capsys.readouterr().out == landing_page() + "\n\n"