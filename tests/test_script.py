from v2lang.script import interpret, parse_line


def test_print_writes_argument_to_stdout(capsys):
    parse_line("print.system(hello world)")
    captured = capsys.readouterr()
    assert captured.out == "hello world\n"
    assert captured.err == ""


def test_error_writes_argument_to_stderr(capsys):
    parse_line("error.system(went wrong)")
    captured = capsys.readouterr()
    assert captured.err == "went wrong\n"
    assert captured.out == ""


def test_argument_stops_at_first_closing_paren(capsys):
    parse_line("print.system(first)second)")
    assert capsys.readouterr().out == "first\n"


def test_leading_closing_parens_are_skipped(capsys):
    parse_line("print.system())later)")
    assert capsys.readouterr().out == "later\n"


def test_empty_argument_does_nothing(capsys):
    parse_line("print.system()")
    captured = capsys.readouterr()
    assert (captured.out, captured.err) == ("", "")


def test_missing_closing_paren_takes_rest_of_line(capsys):
    parse_line("print.system(unclosed\r\n")
    assert capsys.readouterr().out == "unclosed\n"


def test_unknown_and_indented_lines_are_ignored(capsys):
    parse_line("unknown.system(x)")
    parse_line("  print.system(x)")
    captured = capsys.readouterr()
    assert (captured.out, captured.err) == ("", "")


def test_createfile_creates_empty_file(tmp_path, capsys):
    target = tmp_path / "made.txt"
    parse_line(f"createfile.system({target})")
    assert target.exists()
    assert target.read_text() == ""
    assert capsys.readouterr().out == f"File created: {target}\n"


def test_createfile_truncates_existing_file(tmp_path, capsys):
    target = tmp_path / "full.txt"
    target.write_text("contents")
    parse_line(f"createfile.system({target})")
    assert target.read_text() == ""


def test_createfile_failure_reports_on_stderr(tmp_path, capsys):
    target = tmp_path / "missing" / "file.txt"
    parse_line(f"createfile.system({target})")
    captured = capsys.readouterr()
    assert not target.exists()
    assert captured.err == f"Failed to create file: {target}\n"
    assert captured.out == ""


def test_os_system_runs_shell_command(capfd):
    parse_line("os.system(echo hi)")
    assert capfd.readouterr().out.strip() == "hi"


def test_interpret_runs_lines_in_order_and_skips_blanks(capsys):
    interpret("print.system(one)\n\n\nerror.system(two)\r\nprint.system(three)\n")
    captured = capsys.readouterr()
    assert captured.out == "one\nthree\n"
    assert captured.err == "two\n"


def test_interpret_empty_code_produces_nothing(capsys):
    interpret("")
    captured = capsys.readouterr()
    assert (captured.out, captured.err) == ("", "")


def test_interpret_creates_several_files(tmp_path, capsys):
    names = [tmp_path / "a.txt", tmp_path / "b.txt"]
    interpret("\n".join(f"createfile.system({name})" for name in names))
    assert all(name.exists() for name in names)
    out_lines = capsys.readouterr().out.splitlines()
    assert out_lines == [f"File created: {name}" for name in names]