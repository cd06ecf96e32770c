"""File and folder helpers with an in-memory cache of file contents."""

from __future__ import annotations

import glob
import os
import shutil
import subprocess
import time
from collections.abc import Iterable

from corekit.numbers import clean_all_spaces

DEFAULT_MAX_FILES_IN_RAM = 1000
DEFAULT_FILE_PERMISSION = "664"
DEFAULT_MARKER_FILE = "readme.txt"
DEFAULT_MARKER_CONTENT = "Do not edit this folder."

# Folders that delete_folder_tree must never touch.
PROTECTED_FOLDERS: set[str] = set()

BAD_NAME_CHARACTERS = frozenset('/."\n\t\'@!~`$%^\\+,;:?<>')


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return handle.read()


class FileCache:
    """Keeps the contents of up to ``max_files`` files in memory."""

    def __init__(self, max_files: int = DEFAULT_MAX_FILES_IN_RAM) -> None:
        self.max_files = max_files
        self._contents: dict[str, str] = {}

    def read(self, path: str, from_disk: bool = False) -> str:
        """Return the contents of ``path``, from memory unless ``from_disk`` is true.

        Raises FileNotFoundError (and forgets the file) when it does not exist.
        """
        if not from_disk and path in self._contents:
            return self._contents[path]
        if not file_exists(path):
            self.forget(path)
            raise FileNotFoundError(path)
        text = _read_text(path)
        if path in self._contents or len(self._contents) < self.max_files:
            self._contents[path] = text
        return text

    def forget(self, path: str) -> None:
        """Drop ``path`` from memory if it is there."""
        self._contents.pop(path, None)


DEFAULT_CACHE = FileCache()


def _refresh(path: str) -> None:
    try:
        DEFAULT_CACHE.read(path, from_disk=True)
    except FileNotFoundError:
        pass


def improve_name(name: str) -> str:
    """Strip blanks and one trailing slash; return "" for a protected or empty name."""
    cleaned = clean_all_spaces(name)
    if cleaned.endswith("/"):
        cleaned = cleaned[:-1]
    if not cleaned or cleaned in PROTECTED_FOLDERS:
        return ""
    return cleaned


def delete_folder_tree(folder: str) -> None:
    """Remove ``folder`` with everything below it; protected names are left alone."""
    target = improve_name(folder)
    if not target:
        return
    if os.path.isdir(target) and not os.path.islink(target):
        shutil.rmtree(target, ignore_errors=True)
    elif os.path.lexists(target):
        os.remove(target)


def delete_file(path: str) -> None:
    """Delete ``path`` if it is a file and forget its cached contents."""
    DEFAULT_CACHE.forget(path)
    if file_exists(path):
        os.remove(path)


def clear_folder(folder: str, extension: str = "*") -> list[str]:
    """Delete the files in ``folder`` matching ``*.extension``; return their paths."""
    suffix = extension if extension.startswith(".") else "." + extension
    removed = []
    for path in sorted(glob.glob(os.path.join(folder, "*" + suffix))):
        if os.path.isfile(path):
            delete_file(path)
            removed.append(path)
    return removed


def list_files(folder: str) -> list[str]:
    """Return the paths of the entries of ``folder``, sorted."""
    return sorted(os.path.join(folder, name) for name in os.listdir(folder))


def file_exists(path: str) -> bool:
    """Return True if ``path`` is an existing file."""
    return os.path.isfile(path)


def file_to_string(path: str, from_disk: bool = False) -> str:
    """Return the contents of ``path`` through the shared cache."""
    return DEFAULT_CACHE.read(path, from_disk)


def rename_file(source: str, target: str) -> None:
    """Rename ``source`` to ``target``; nothing happens if ``source`` is missing.

    Raises FileExistsError when ``target`` already exists.
    """
    if file_exists(target):
        raise FileExistsError(target)
    if not file_exists(source):
        return
    os.rename(source, target)
    DEFAULT_CACHE.forget(source)
    _refresh(target)


def change_permissions(path: str, permission: str | int = DEFAULT_FILE_PERMISSION) -> None:
    """Set the mode of ``path`` from an octal string such as ``"664"``."""
    if isinstance(permission, str):
        try:
            mode = int(permission, 8)
        except ValueError:
            raise ValueError(f"not an octal permission: {permission!r}") from None
    else:
        mode = permission
    os.chmod(path, mode)


def copy_file(source: str, target: str) -> None:
    """Copy ``source`` to ``target``, overwriting it."""
    shutil.copy(source, target)
    DEFAULT_CACHE.forget(target)


def copy_missing_files(source: str, target: str) -> list[str]:
    """Copy the files ``source/*.*`` that are not yet in ``target``; return their names."""
    os.makedirs(target, exist_ok=True)
    copied = []
    for path in sorted(glob.glob(os.path.join(source, "*.*"))):
        if not os.path.isfile(path):
            continue
        name = os.path.basename(path)
        destination = os.path.join(target, name)
        if os.path.lexists(destination):
            continue
        shutil.copy2(path, destination)
        copied.append(name)
    return copied


def run_quiet(command: str) -> int:
    """Run a shell command with its output discarded; return its exit status."""
    return subprocess.run(
        command, shell=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False
    ).returncode


def run_command(command: str) -> int:
    """Run a shell command; return its exit status."""
    return subprocess.run(command, shell=True, check=False).returncode


def run_and_capture(command: str) -> str:
    """Run a shell command and return what it wrote to standard output."""
    return subprocess.run(
        command, shell=True, stdout=subprocess.PIPE, text=True, check=False
    ).stdout


def _write(path: str, data: str | bytes) -> None:
    delete_file(path)
    if isinstance(data, bytes):
        with open(path, "wb") as handle:
            handle.write(data)
    else:
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(data)
    change_permissions(path)
    _refresh(path)


def write_text(path: str, text: str) -> None:
    """Replace ``path`` with ``text``."""
    _write(path, text)


def write_lines(path: str, lines: Iterable[str]) -> None:
    """Write each line followed by a newline, then one more newline."""
    _write(path, "".join(line + "\n" for line in lines) + "\n")


def write_sorted_lines(path: str, lines: Iterable[str]) -> None:
    """Write the distinct lines in sorted order, each followed by a newline."""
    _write(path, "".join(line + "\n" for line in sorted(set(lines))))


def write_bytes(path: str, data: bytes | Iterable[int]) -> None:
    """Replace ``path`` with raw bytes; integers are taken modulo 256."""
    payload = data if isinstance(data, bytes) else bytes(value & 0xFF for value in data)
    _write(path, payload)


def modification_time(path: str) -> int:
    """Return the last modification time of ``path`` in whole seconds since the epoch."""
    return int(os.path.getmtime(path))


def modification_times(paths: Iterable[str]) -> list[int]:
    """Return :func:`modification_time` for each path."""
    return [modification_time(path) for path in paths]


def folder_of(path: str) -> str:
    """Return the part of ``path`` before its last slash, or "" when it has none."""
    index = path.rfind("/")
    return path[:index] if index >= 0 else ""


def is_legal_file_name(name: str) -> bool:
    """Return True if ``name`` holds no path separators, dots, quotes or shell characters."""
    return not any(ch in BAD_NAME_CHARACTERS for ch in name)


def stem(path: str, prefix_to_ignore: str = "") -> str:
    """Return the file name without folder and extension.

    As many leading characters as ``prefix_to_ignore`` has are dropped.
    """
    name = path[len(folder_of(path)):].partition(".")[0]
    if name.startswith("/"):
        name = name[1:]
    return name[len(prefix_to_ignore):]


def extension(path: str) -> str:
    """Return everything after the first dot of the file name."""
    pos = len(folder_of(path))
    if path[pos:pos + 1] == "/":
        pos += 1
    pos += len(stem(path))
    if path[pos:pos + 1] == ".":
        pos += 1
    return path[pos:]


def select_with_extension(paths: Iterable[str], ext: str, complement: bool = False) -> list[str]:
    """Keep the paths whose extension is ``ext`` (or is not, with ``complement``)."""
    return [path for path in paths if (extension(path) == ext) != complement]


def delete_old_files(folder: str, ext: str, max_age: int, complement: bool = False) -> list[str]:
    """Delete files of ``folder`` with extension ``ext`` older than ``max_age`` seconds.

    Returns the deleted paths.
    """
    now = int(time.time())
    deleted = []
    for path in select_with_extension(list_files(folder), ext, complement):
        if now - modification_time(path) > max_age:
            delete_file(path)
            deleted.append(path)
    return deleted


def folder_exists(path: str) -> bool:
    """Return True if ``path`` is an existing directory."""
    return os.path.isdir(path)


def make_dir(path: str) -> bool:
    """Create ``path`` group-writable and set-group-id; False if empty or existing."""
    if not path or folder_exists(path):
        return False
    os.mkdir(path)
    os.chmod(path, 0o2774)
    return True


def create_folder_if_missing(
    folder: str,
    marker_file: str = DEFAULT_MARKER_FILE,
    marker_content: str = DEFAULT_MARKER_CONTENT,
    extra_file: str | None = None,
    extra_content: str = " ",
) -> bool:
    """Create ``folder`` with a marker file unless the marker already exists.

    Returns True when the folder was set up.
    """
    marker = folder + "/" + marker_file
    if file_exists(marker):
        return False
    make_dir(folder)
    write_text(marker, marker_content)
    if extra_file is not None:
        write_text(folder + "/" + extra_file, extra_content)
    return True