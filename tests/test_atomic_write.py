import io
import threading

import pytest

from cbench.atomic_write import append_line, main, run, worker
from cbench.log import Logger


def test_append_line_appends_and_counts(tmp_path):
    target = tmp_path / "out.txt"
    assert append_line(target, "a") == len("a\n")
    append_line(target, "bc")
    assert target.read_text() == "a\nbc\n"


def test_append_line_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        append_line(tmp_path / "nope" / "out.txt", "x")


def test_worker_writes_own_thread_id(tmp_path):
    target = tmp_path / "out.txt"
    stream = io.StringIO()
    ident = worker(target, 7, Logger(stream))
    assert ident == threading.get_ident()
    assert target.read_text() == f"{ident}\n"
    output = stream.getvalue()
    assert f"current thread id: {ident}, input arg: 7" in output
    assert f"data to {target}" in output


def test_run_writes_one_line_per_thread(tmp_path):
    target = tmp_path / "out.txt"
    idents = run(target, 4, Logger(io.StringIO()))
    lines = target.read_text().splitlines()
    assert len(lines) == 4
    assert sorted(int(line) for line in lines) == sorted(idents)


def test_run_default_thread_count_matches_lines(tmp_path):
    target = tmp_path / "out.txt"
    idents = run(target, None, Logger(io.StringIO()))
    assert len(target.read_text().splitlines()) == len(idents)
    assert len(idents) >= 1


def test_run_rejects_zero_threads(tmp_path):
    with pytest.raises(ValueError):
        run(tmp_path / "out.txt", 0, Logger(io.StringIO()))


def test_run_propagates_worker_error(tmp_path):
    stream = io.StringIO()
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "nope" / "out.txt", 2, Logger(stream))
    assert "ERROR" in stream.getvalue()


def test_main_success_and_failure(tmp_path):
    target = tmp_path / "out.txt"
    assert main(["--path", str(target), "--threads", "2"]) == 0
    assert len(target.read_text().splitlines()) == 2
    assert main(["--path", str(tmp_path / "nope" / "x"), "--threads", "1"]) == 1