"""Cheat database lookup, cheat selection and writing cheat files."""

from __future__ import annotations

import bz2
import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)

SELECTED_MAGIC = "\ue071 "
"""Prefix marking a cheat cell as selected."""

CheatTable = Mapping[str, Mapping[str, Mapping[str, Sequence[str]]]]


def _is_selected(cell: str) -> bool:
    return cell.startswith(SELECTED_MAGIC)


def _strip_magic(cell: str) -> str:
    return cell[len(SELECTED_MAGIC):] if _is_selected(cell) else cell


class CheatManager:
    """Cheat codes keyed by title id, then build id, then cheat name."""

    def __init__(self, cheats: Any) -> None:
        self.cheats = cheats

    @property
    def loaded(self) -> bool:
        """True when a cheat database was read."""
        return self.cheats is not None

    @classmethod
    def load(cls, json_path: str | Path, archive_path: str | Path) -> CheatManager:
        """Read the plain JSON database if present, otherwise the bzip2 archive.

        A plain JSON file that does not parse yields an empty database. An
        archive that does not decompress yields no database at all.
        """
        json_path = Path(json_path)
        archive_path = Path(archive_path)
        if json_path.is_file():
            try:
                text = json_path.read_text(encoding="utf-8")
            except OSError as exc:
                _log.warning("Failed to open %s with errno %s.", json_path, exc.errno)
                return cls(None)
            try:
                data = json.loads(text)
            except ValueError:
                data = {}
            return cls(data if isinstance(data, dict) else {})

        try:
            compressed = archive_path.read_bytes()
        except OSError as exc:
            _log.warning("Failed to open %s with errno %s.", archive_path, exc.errno)
            return cls(None)
        try:
            raw = bz2.decompress(compressed)
        except (OSError, ValueError):
            return cls(None)
        return cls(json.loads(raw.decode("utf-8")))

    def _builds(self, key: str) -> Mapping[str, Mapping[str, Sequence[str]]]:
        if not self.cheats:
            return {}
        builds = self.cheats.get(key)
        return builds if isinstance(builds, Mapping) else {}

    def are_cheats_available(self, key: str) -> bool:
        """True if the database has an entry for the title ``key``."""
        return bool(self.cheats) and key in self.cheats

    def cheat_names(self, key: str) -> list[str]:
        """Cheat names of every build of a title, builds and names in sorted order."""
        builds = self._builds(key)
        return [name for build_id in sorted(builds) for name in sorted(builds[build_id])]

    def build_cheat_file(self, key: str, build_id: str, selections: Iterable[str]) -> str:
        """Text of the cheat file for one build, holding the selected cheats it knows."""
        codes = self._builds(key).get(build_id, {})
        parts = []
        for cell in selections:
            if not _is_selected(cell):
                continue
            name = _strip_magic(cell)
            if name in codes:
                lines = "".join(f"{line}\n" for line in codes[name])
                parts.append(f"[{name}]\n{lines}\n")
        return "".join(parts)

    def save(self, key: str, selections: Sequence[str], contents_root: str | Path) -> list[Path]:
        """Write one ``<build id>.txt`` per build under ``<root>/<key>/cheats``.

        Returns the paths written; failures are logged and skipped.
        """
        folder = Path(contents_root) / key / "cheats"
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            _log.error("Failed to create %s with errno %s.", folder, exc.errno)
        written = []
        for build_id in sorted(self._builds(key)):
            out_path = folder / f"{build_id}.txt"
            try:
                out_path.write_text(
                    self.build_cheat_file(key, build_id, selections), encoding="utf-8"
                )
            except OSError as exc:
                _log.error("Failed to write %s with errno %s.", out_path, exc.errno)
                continue
            written.append(out_path)
        return written


class CheatSelection:
    """Cells of cheat names, each marked selected or not."""

    def __init__(self, names: Iterable[str], existing: str = "") -> None:
        self._cells = [
            SELECTED_MAGIC + name if name in existing else name for name in names
        ]
        self.multi_selected = False

    def __len__(self) -> int:
        return len(self._cells)

    def toggle(self, index: int) -> str:
        """Flip the selection of one cell and return its new text."""
        if not 0 <= index < len(self._cells):
            raise IndexError(f"cell index {index} out of range")
        cell = self._cells[index]
        self._cells[index] = _strip_magic(cell) if _is_selected(cell) else SELECTED_MAGIC + cell
        return self._cells[index]

    def toggle_all(self) -> None:
        """Deselect every cell after a select-all, otherwise select every cell."""
        if self.multi_selected:
            self._cells = [_strip_magic(cell) for cell in self._cells]
        else:
            self._cells = [
                cell if _is_selected(cell) else SELECTED_MAGIC + cell for cell in self._cells
            ]
        self.multi_selected = not self.multi_selected

    def cells(self) -> list[str]:
        """Cell texts, selected ones carrying the selection prefix."""
        return list(self._cells)

    def selected_names(self) -> list[str]:
        return [_strip_magic(cell) for cell in self._cells if _is_selected(cell)]


def read_existing_cheats(folder: str | Path) -> str:
    """Concatenate the regular files in ``folder``, each preceded by a newline."""
    path = Path(folder)
    if not path.is_dir():
        return ""
    chunks = []
    for entry in sorted(path.iterdir()):
        if entry.is_dir():
            continue
        try:
            chunks.append("\n" + entry.read_text(encoding="utf-8", errors="replace"))
        except OSError:
            continue
    return "".join(chunks)