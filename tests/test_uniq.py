import io
import sys

import pytest

import streams
import uniq


def uniq_chars(raw, **kwargs):

    collapser = uniq.AdjacencyCollapser(**kwargs)
    stdout = io.StringIO()
    collapser.collapse(streams.read_lines(io.BytesIO(raw)), stdout=stdout)

    return stdout.getvalue()


def test_collapse_adjacent_repeats_only():

    assert uniq_chars(b"a\na\nb\na\n") == "a\nb\na\n"


def test_count_mode():

    assert uniq_chars(b"x\nx\nx\ny\n", count=True) == "      3 x\n      1 y\n"


def test_empty_input_prints_nothing():

    assert uniq_chars(b"") == ""
    assert uniq_chars(b"", count=True) == ""


def test_last_line_gets_an_end_added():

    assert uniq_chars(b"a\nb") == "a\nb\n"
    assert uniq_chars(b"a\na") == "a\n"
    assert uniq_chars(b"a\nb", count=True) == "      1 a\n      1 b\n"


def test_terminated_and_unterminated_lines_compare_equal():

    assert uniq_chars(b"z\nz", count=True) == "      2 z\n"


def test_blank_lines_collapse_too():

    assert uniq_chars(b"\n\n\nq\n", count=True) == "      3 \n      1 q\n"


def test_repeated_and_unique_filters():

    raw = b"a\na\nb\nc\nc\nc\n"

    assert uniq_chars(raw, repeated=True) == "a\nc\n"
    assert uniq_chars(raw, unique=True) == "b\n"
    assert uniq_chars(raw, repeated=True, unique=True) == ""
    assert uniq_chars(raw, repeated=True, count=True) == "      2 a\n      3 c\n"


def test_ignore_case_keeps_the_first_spelling():

    assert uniq_chars(b"Ab\naB\nAB\nb\n", ignore_case=True, count=True) == (
        "      3 Ab\n      1 b\n"
    )


def test_collapse_twice_is_collapse_once():

    raw = b"a\na\nb\n\n\nb\nc\nc"

    once = uniq_chars(raw)
    twice = uniq_chars(once.encode())

    assert twice == once


def test_main_writes_the_out_file(tmp_path, capsys):

    in_path = tmp_path / "in.txt"
    in_path.write_bytes(b"x\nx\ny\n")
    out_path = tmp_path / "out.txt"
    out_path.write_text("stale\nstale\nstale\n")

    uniq.main(["uniq.py", "-c", str(in_path), str(out_path)])

    assert out_path.read_text() == "      2 x\n      1 y\n"
    assert capsys.readouterr().out == ""


def test_main_reads_stdin(monkeypatch, capsys):

    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"p\np\nq")))

    uniq.main(["uniq.py"])

    assert capsys.readouterr().out == "p\nq\n"


def test_main_quits_when_the_in_file_wont_open(tmp_path, capsys):

    missing = str(tmp_path / "missing.txt")
    out_path = tmp_path / "out.txt"

    with pytest.raises(SystemExit) as exc_info:
        uniq.main(["uniq.py", missing, str(out_path)])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err == (
        "uniq.py: {}: No such file or directory\n".format(missing)
    )
    assert not out_path.exists()


def test_main_exits_1_on_read_failure(broken_stdin, capsys):

    with pytest.raises(SystemExit) as exc_info:
        uniq.main(["uniq.py"])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err == "uniq.py: error: -: Input/output error\n"


def test_main_quits_when_the_out_file_wont_open(tmp_path, capsys):

    in_path = tmp_path / "in.txt"
    in_path.write_bytes(b"x\nx\n")

    with pytest.raises(SystemExit) as exc_info:
        uniq.main(["uniq.py", str(in_path), str(tmp_path)])

    assert exc_info.value.code == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "uniq.py: {}: Is a directory\n".format(tmp_path)
