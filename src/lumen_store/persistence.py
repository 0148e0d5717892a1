"""Whole-file persistence for :class:`~lumen_store.model.Dataset`.

Every sync serializes the complete dataset and overwrites the backing file.
There is no journal: a crash in the middle of a direct overwrite can leave a
truncated file behind, which the next load reports as corrupt.  Pass
``atomic=True`` to write a sibling temp file and rename it into place instead.
"""

from __future__ import annotations

import logging
import os

from pydantic import ValidationError

from lumen_store.exceptions import CorruptStoreError, StoreIOError
from lumen_store.model import Dataset

logger = logging.getLogger(__name__)

FILE_MODE = 0o600
_TMP_SUFFIX = ".tmp"


def load_or_create(path: str, *, atomic: bool = False) -> Dataset:
    """Load the dataset stored at *path*, creating an empty one if it is missing.

    Raises:
        CorruptStoreError: The file exists but does not hold a valid dataset.
        StoreIOError: The file exists but cannot be read, or a new file
            cannot be written.
    """
    log_extra = {"store": "file", "method": "load"}
    logger.debug("reading file: %s", path, extra=log_extra)
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except FileNotFoundError:
        logger.info("creating new file: %s", path, extra=log_extra)
        dataset = Dataset()
        sync(dataset, path, atomic=atomic)
        return dataset
    except OSError as exc:
        logger.error("read error: %s", exc, extra=log_extra)
        raise StoreIOError("load", path, str(exc)) from exc

    try:
        return Dataset.from_bytes(data)
    except ValidationError as exc:
        logger.error("parse error: %s", exc, extra=log_extra)
        raise CorruptStoreError(path, str(exc)) from exc


def sync(dataset: Dataset, path: str, *, atomic: bool = False) -> None:
    """Serialize *dataset* and replace the contents of *path* with it.

    The dataset itself is never modified.  On failure memory and disk
    disagree until the next successful sync.
    """
    log_extra = {"store": "file", "method": "sync"}
    try:
        payload = dataset.to_bytes()
    except (TypeError, ValueError) as exc:
        logger.error("marshaling error: %s", exc, extra=log_extra)
        raise StoreIOError("sync", path, f"could not serialize dataset: {exc}") from exc

    target = path + _TMP_SUFFIX if atomic else path
    logger.debug("writing %d bytes to file: %s", len(payload), target, extra=log_extra)
    try:
        _write(target, payload, fsync=atomic)
        if atomic:
            os.replace(target, path)
    except OSError as exc:
        logger.error("write error: %s", exc, extra=log_extra)
        raise StoreIOError("sync", path, f"could not write to file: {exc}") from exc


def _write(path: str, payload: bytes, *, fsync: bool) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as fh:
        fh.write(payload)
        if fsync:
            fh.flush()
            os.fsync(fh.fileno())
    # O_CREAT's mode only applies to new files; tighten pre-existing ones too.
    os.chmod(path, FILE_MODE)
