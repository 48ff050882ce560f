"""Key-value record stores for submissions.

Stores are opaque to the core: they create, read, update and list records
keyed by an id. Two backends are provided:

- ``InMemorySubmissionStore`` for tests and one-shot runs
- ``JsonDirSubmissionStore`` writing one JSON file per record
"""

from __future__ import annotations

import datetime as dt
import logging
import os
import re
import tempfile
import threading
import uuid
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from color3.core.errors import SubmissionNotFoundError
from color3.core.submissions.models import Submission, SubmissionRecord

logger = logging.getLogger(__name__)

_RECORD_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def new_record_id() -> str:
    """Generate a new opaque record id."""
    return uuid.uuid4().hex


class SubmissionStore(Protocol):
    """Protocol for submission record stores.

    Implementations handle their own write safety; records are replaced
    whole on update, never partially edited.
    """

    def create(self, submission: Submission, record_id: str | None = None) -> SubmissionRecord:
        """Store a new submission and return its record."""
        ...

    def get(self, record_id: str) -> SubmissionRecord:
        """Return the record for ``record_id``.

        Raises:
            SubmissionNotFoundError: If no such record exists
        """
        ...

    def update(self, record_id: str, submission: Submission) -> SubmissionRecord:
        """Replace the submission of an existing record, keeping its id.

        Raises:
            SubmissionNotFoundError: If no such record exists
        """
        ...

    def list(self) -> list[SubmissionRecord]:
        """All records, oldest first."""
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...

    def submissions(self) -> list[Submission]:
        """Stored submissions, oldest first."""
        ...


def _updated(record: SubmissionRecord, submission: Submission) -> SubmissionRecord:
    return record.model_copy(
        update={"submission": submission, "updated_at": dt.datetime.now(dt.UTC)}
    )


class InMemorySubmissionStore:
    """Thread-safe in-process store."""

    def __init__(self) -> None:
        self._records: dict[str, SubmissionRecord] = {}
        self._lock = threading.Lock()

    def create(self, submission: Submission, record_id: str | None = None) -> SubmissionRecord:
        record = SubmissionRecord(id=record_id or new_record_id(), submission=submission)
        with self._lock:
            if record.id in self._records:
                raise ValueError(f"Submission already exists: {record.id}")
            self._records[record.id] = record
        logger.info(f"Created submission {record.id}")
        return record

    def get(self, record_id: str) -> SubmissionRecord:
        with self._lock:
            try:
                return self._records[record_id]
            except KeyError:
                raise SubmissionNotFoundError(record_id) from None

    def update(self, record_id: str, submission: Submission) -> SubmissionRecord:
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                raise SubmissionNotFoundError(record_id)
            record = _updated(existing, submission)
            self._records[record_id] = record
        logger.info(f"Updated submission {record_id}")
        return record

    def list(self) -> list[SubmissionRecord]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda r: r.created_at)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def submissions(self) -> list[Submission]:
        """Stored submissions, oldest first."""
        return [record.submission for record in self.list()]


class JsonDirSubmissionStore:
    """Store keeping one ``<id>.json`` file per record under a directory.

    Writes go to a temp file in the same directory and are moved into place
    so readers never see a partial record. Creation links the temp file into
    place, so two writers racing on one id cannot both succeed.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _path(self, record_id: str) -> Path:
        if not _RECORD_ID_RE.match(record_id):
            raise ValueError(f"Invalid record id: {record_id!r}")
        return self.root / f"{record_id}.json"

    def _write(self, record: SubmissionRecord, *, exclusive: bool = False) -> None:
        """Write a record via a temp file.

        With ``exclusive`` the temp file is hard-linked into place, which fails
        if the record already exists; otherwise it replaces the record.

        Raises:
            ValueError: If ``exclusive`` and the record already exists
        """
        final_path = self._path(record.id)
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{record.id}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(record.model_dump_json(indent=2))
            if exclusive:
                try:
                    os.link(tmp_name, final_path)
                except FileExistsError:
                    raise ValueError(f"Submission already exists: {record.id}") from None
            else:
                os.replace(tmp_name, final_path)
        finally:
            Path(tmp_name).unlink(missing_ok=True)

    def _read(self, path: Path) -> SubmissionRecord:
        try:
            return SubmissionRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise ValueError(f"Corrupt submission record {path}: {e}") from e

    def create(self, submission: Submission, record_id: str | None = None) -> SubmissionRecord:
        record = SubmissionRecord(id=record_id or new_record_id(), submission=submission)
        self._write(record, exclusive=True)
        logger.info(f"Created submission {record.id} in {self.root}")
        return record

    def get(self, record_id: str) -> SubmissionRecord:
        path = self._path(record_id)
        if not path.exists():
            raise SubmissionNotFoundError(record_id)
        return self._read(path)

    def update(self, record_id: str, submission: Submission) -> SubmissionRecord:
        record = _updated(self.get(record_id), submission)
        self._write(record)
        logger.info(f"Updated submission {record_id} in {self.root}")
        return record

    def list(self) -> list[SubmissionRecord]:
        if not self.root.is_dir():
            return []
        records = [self._read(path) for path in sorted(self.root.glob("*.json"))]
        return sorted(records, key=lambda r: r.created_at)

    def count(self) -> int:
        if not self.root.is_dir():
            return 0
        return sum(1 for _ in self.root.glob("*.json"))

    def submissions(self) -> list[Submission]:
        """Stored submissions, oldest first."""
        return [record.submission for record in self.list()]
