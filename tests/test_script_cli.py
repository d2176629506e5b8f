from v2lang.script_cli import main


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Usage: ")
    assert "<script.v2f>" in err


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.v2f")]) == 1
    assert capsys.readouterr().err.startswith("Error opening file")


def test_runs_script_file(tmp_path, capsys):
    created = tmp_path / "out.txt"
    script = tmp_path / "demo.v2f"
    script.write_text(
        "print.system(starting)\n"
        f"createfile.system({created})\n"
        "error.system(careful)\n"
    )
    assert main([str(script)]) == 0
    captured = capsys.readouterr()
    assert captured.out == f"starting\nFile created: {created}\n"
    assert captured.err == "careful\n"
    assert created.exists()


def test_crlf_script_is_trimmed(tmp_path, capsys):
    script = tmp_path / "dos.v2f"
    script.write_bytes(b"print.system(line)\r\nprint.system(next)\r\n")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "line\nnext\n"


def test_extra_arguments_are_ignored(tmp_path, capsys):
    script = tmp_path / "one.v2f"
    script.write_text("print.system(only)\n")
    assert main([str(script), str(tmp_path / "ignored.v2f")]) == 0
    assert capsys.readouterr().out == "only\n"