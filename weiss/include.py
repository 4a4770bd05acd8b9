"""Expand #include directives of a source file recursively."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

STANDARD_LIBRARY_DIR = Path("/opt/gcc-15/include/c++/15.1.0")

_USER_RE = re.compile(r'\s*#include\s+"(.+)"\s*')
_STANDARD_RE = re.compile(r"\s*#include\s+<(.+)>\s*")


class IncludeError(RuntimeError):
    """Raised when a file cannot be opened or a header cannot be found."""


class IncludeType(Enum):
    USER_CODE = "user"
    STANDARD_LIBRARY = "standard"
    OTHER = "other"


@dataclass(frozen=True)
class IncludeInfo:
    type: IncludeType
    file_name: str = ""


def get_include_info(line: str) -> IncludeInfo:
    """Classify a line as a user include, a standard include or something else."""
    if match := _USER_RE.fullmatch(line):
        return IncludeInfo(IncludeType.USER_CODE, match.group(1))
    if match := _STANDARD_RE.fullmatch(line):
        return IncludeInfo(IncludeType.STANDARD_LIBRARY, match.group(1))
    return IncludeInfo(IncludeType.OTHER)


def find_standard_library_path(
    file_name: str, stl_dir: str | os.PathLike[str] = STANDARD_LIBRARY_DIR
) -> Path:
    """Search ``stl_dir`` recursively for a file with the header's base name."""
    base_name = file_name.rsplit("/", 1)[-1]
    for root, dirs, files in os.walk(stl_dir):
        dirs.sort()
        for name in sorted(files):
            candidate = Path(root) / name
            if name == base_name and candidate.is_file():
                return candidate
    raise IncludeError(f"Standard library not found: {base_name}")


def find_path(
    source: str | os.PathLike[str],
    include_type: IncludeType,
    file_name: str,
    stl_dir: str | os.PathLike[str] = STANDARD_LIBRARY_DIR,
) -> Path:
    """Locate the file named by an include found in ``source``."""
    if include_type is IncludeType.STANDARD_LIBRARY:
        return find_standard_library_path(file_name, stl_dir)
    return Path(source).parent / file_name


def read_file(
    file_path: str | os.PathLike[str],
    stl_dir: str | os.PathLike[str] = STANDARD_LIBRARY_DIR,
) -> str:
    """Return the file's text with every include replaced by the included text."""
    path = Path(file_path)
    try:
        with path.open(encoding="utf-8", newline="") as stream:
            lines = stream.read().split("\n")
    except OSError as exc:
        raise IncludeError(f"Failed to open file: {path}") from exc
    if lines and lines[-1] == "":
        lines.pop()

    parts: list[str] = []
    for line in lines:
        info = get_include_info(line)
        if info.type is IncludeType.OTHER:
            parts.append(line + "\n")
        else:
            included = find_path(path, info.type, info.file_name, stl_dir)
            parts.append(read_file(included, stl_dir))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> None:
    """Print the given file with its includes expanded."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        raise ValueError("Too many argument")
    if not args:
        raise ValueError("Missing argument")
    print(read_file(args[0]))


if __name__ == "__main__":
    main()