"""Create a skeleton project directory with a CMake build file."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

__all__ = ["ProjectExistsError", "cmake_lists", "download", "create_project", "main"]

LOG_FILES = ("log.c", "log.h")


class ProjectExistsError(FileExistsError):
    """Raised when the project path is already taken."""


def cmake_lists(name: str) -> str:
    """Return the CMakeLists.txt content for a project named ``name``."""
    return (
        "cmake_minimum_required(VERSION 3.10)\n"
        f"project({name})\n"
        "set(CMAKE_EXPORT_COMPILE_COMMANDS ON)\n"
        f"add_executable({name} main.c log.c)"
    )


def download(url: str, dest_dir: str | os.PathLike[str]) -> int:
    """Fetch ``url`` into ``dest_dir`` with wget; return wget's exit status.

    Raises OSError when wget cannot be started.
    """
    try:
        completed = subprocess.run(["wget", url], cwd=os.fspath(dest_dir), check=False)
    except OSError as exc:
        raise OSError(f"download {url} failed: {exc}") from exc
    return completed.returncode


def create_project(
    name: str,
    parent: str | os.PathLike[str] = ".",
    fetch: Optional[str] = None,
) -> Path:
    """Create ``parent/name`` with CMakeLists.txt and an empty main.c.

    When ``fetch`` is a base URL, the logging sources below it are
    downloaded into the new directory. Returns the project path.
    """
    project = Path(parent) / name
    if os.path.lexists(project):
        raise ProjectExistsError(f"file or directory named `{name}` already exists!")

    project.mkdir(mode=0o755)

    fd = os.open(project / "CMakeLists.txt", os.O_RDWR | os.O_CREAT | getattr(os, "O_SYNC", 0), 0o644)
    try:
        os.write(fd, cmake_lists(name).encode())
    finally:
        os.close(fd)

    os.close(os.open(project / "main.c", os.O_RDONLY | os.O_CREAT, 0o644))

    if fetch is not None:
        base = fetch.rstrip("/")
        for filename in LOG_FILES:
            download(f"{base}/{filename}", project)

    return project


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="init-c-project")
    parser.add_argument("name", nargs="?")
    parser.add_argument("--fetch-from", default=None, help="base URL of the logging sources")
    args = parser.parse_args(argv)

    if not args.name:
        print("please input project name!")
        return 1

    try:
        create_project(args.name, ".", args.fetch_from)
    except ProjectExistsError as exc:
        print(exc)
        return 1
    except OSError as exc:
        print(f"create project failed: {exc}", file=sys.stderr)
        return 1
    return 0