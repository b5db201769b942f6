"""Several threads append lines to one file through O_APPEND writes."""

from __future__ import annotations

import argparse
import os
import threading
from typing import Optional

from cbench.log import Logger, get_logger

__all__ = ["append_line", "worker", "run", "main"]

_O_SYNC = getattr(os, "O_SYNC", 0)


def append_line(path: str | os.PathLike[str], text: str) -> int:
    """Append ``text`` and a newline to ``path`` in a single write.

    Returns the number of bytes written.
    """
    fd = os.open(path, os.O_CREAT | os.O_APPEND | os.O_WRONLY | _O_SYNC, 0o755)
    try:
        return os.write(fd, f"{text}\n".encode())
    finally:
        os.close(fd)


def worker(
    path: str | os.PathLike[str],
    token: int,
    logger: Optional[Logger] = None,
) -> int:
    """Append the current thread id to ``path``; return that id."""
    log = logger if logger is not None else get_logger()
    ident = threading.get_ident()
    log.info("current thread id: %d, input arg: %d", ident, token)
    count = append_line(path, str(ident))
    log.info("write %d bytes data to %s", count, os.fspath(path))
    return ident


def run(
    path: str | os.PathLike[str] = "test.txt",
    thread_count: Optional[int] = None,
    logger: Optional[Logger] = None,
) -> list[int]:
    """Run one worker thread per CPU (or ``thread_count``) and wait for all.

    Returns the thread ids that were written. The first worker error is
    raised after every started thread has finished.
    """
    log = logger if logger is not None else get_logger()
    count = thread_count if thread_count is not None else (os.cpu_count() or 1)
    if count < 1:
        raise ValueError("thread_count must be at least 1")

    guard = threading.Lock()
    idents: list[int] = []
    errors: list[OSError] = []

    def _target(token: int) -> None:
        try:
            ident = worker(path, token, log)
        except OSError as exc:
            log.error("worker %d failed: %s", token, exc)
            with guard:
                errors.append(exc)
            return
        with guard:
            idents.append(ident)

    started: list[threading.Thread] = []
    for token in range(count):
        thread = threading.Thread(target=_target, args=(token,))
        try:
            thread.start()
        except RuntimeError as exc:
            log.error("create thread failed: %s", exc)
            break
        started.append(thread)

    for thread in started:
        thread.join()

    if errors:
        raise errors[0]
    return idents


def _install_lock(logger: Logger) -> None:
    mutex = threading.Lock()

    def _lock(acquire: bool, _udata: object) -> None:
        if acquire:
            mutex.acquire()
        else:
            mutex.release()

    logger.set_lock(_lock, None)


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="atomic-write")
    parser.add_argument("--path", default="test.txt")
    parser.add_argument("--threads", type=int, default=None)
    args = parser.parse_args(argv)

    log = get_logger()
    _install_lock(log)
    try:
        run(args.path, args.threads, log)
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    return 0