"""Durable key-value store for per-file classification records."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from ..constants import LANGUAGE_MATCH, LANGUAGE_OTHER, QUALITY_GOOD, QUALITY_LOW
from ..logging import get_logger
from ..models import ListingView, WorkRecord, subgroup_label

_STORE_VERSION = 1

logger = get_logger("store")


class StoreError(RuntimeError):
    """Raised when the record store cannot be opened, written or decoded."""


class RecordStore:
    """Maps a source file path to its classification record.

    Entries are held in memory and written to a single JSON document on
    :meth:`flush`. The store assumes a single owning process.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._entries: Dict[str, Dict[str, object]] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def clear(self) -> None:
        """Drop every entry, both in memory and on disk."""
        self._entries.clear()
        self.flush()

    def put(self, path: str, record: WorkRecord) -> None:
        """Insert or overwrite the record stored under ``path``."""
        payload = asdict(record)
        payload["file"] = path
        self._entries[path] = payload

    def get(self, path: str) -> Optional[WorkRecord]:
        raw = self._entries.get(path)
        if raw is None:
            return None
        return _record_from_dict(path, raw)

    def iter_all(self) -> Iterator[Tuple[str, WorkRecord]]:
        """Yield every ``(path, record)`` pair ordered by path."""
        for key in sorted(self._entries):
            yield key, _record_from_dict(key, self._entries[key])

    def records(self) -> List[WorkRecord]:
        return [record for _, record in self.iter_all()]

    def flush(self) -> None:
        """Atomically write all entries to disk."""
        payload = {"version": _STORE_VERSION, "entries": self._entries}
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f"{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(json.dumps(payload, indent=2, sort_keys=True))
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Failed to write record store {self._path}: {exc}") from exc
        logger.debug("Flushed %d records to %s", len(self._entries), self._path)

    # ------------------------------------------------------------------
    # Viewer interface

    def get_all(self) -> List[ListingView]:
        return [_listing_view(record) for record in self.records()]

    def set_applied(self, key: str, applied: bool) -> ListingView:
        """Persist the applied flag for a single record."""
        if key not in self._entries:
            raise KeyError(key)
        self._entries[key]["applied"] = bool(applied)
        self.flush()
        return _listing_view(_record_from_dict(key, self._entries[key]))

    # ------------------------------------------------------------------
    # Internal helpers

    def _load(self) -> None:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Failed to open record store {self._path}: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreError(f"Record store {self._path} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict) or data.get("version") != _STORE_VERSION:
            raise StoreError(f"Record store {self._path} has an unsupported format")
        entries = data.get("entries")
        if not isinstance(entries, dict):
            raise StoreError(f"Record store {self._path} has no entries mapping")
        self._entries = {str(key): value for key, value in entries.items()}


def _record_from_dict(key: str, raw: object) -> WorkRecord:
    if not isinstance(raw, dict):
        raise StoreError(f"Stored record for {key} is not an object")
    file = raw.get("file")
    language = raw.get("language")
    quality = raw.get("quality")
    national = raw.get("national")
    content_length = raw.get("content_length")
    applied = raw.get("applied", False)
    if (
        not isinstance(file, str)
        or language not in {LANGUAGE_MATCH, LANGUAGE_OTHER}
        or quality not in {QUALITY_GOOD, QUALITY_LOW}
        or not isinstance(national, bool)
        or isinstance(content_length, bool)
        or not isinstance(content_length, int)
        or content_length < 0
        or not isinstance(applied, bool)
    ):
        raise StoreError(f"Stored record for {key} cannot be decoded")
    return WorkRecord(
        file=file,
        language=language,
        quality=quality,
        national=national,
        content_length=content_length,
        applied=applied,
    )


def _listing_view(record: WorkRecord) -> ListingView:
    facts = [
        "Java position" if record.is_language_match else "Other language",
        f"{record.quality} quality",
        f"{record.content_length} characters",
    ]
    if record.national:
        facts.insert(1, "Uruguayan company")
    return ListingView(
        id=record.file,
        title=Path(record.file).name or record.file,
        company=subgroup_label(record),
        description=", ".join(facts),
        applied=record.applied,
    )


__all__ = ["RecordStore", "StoreError"]
