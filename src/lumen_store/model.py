"""Entry and Dataset — the in-memory shape of a store and its on-disk JSON form.

The JSON field names (``version``, ``seq``, ``pairs``, ``value``, ``bool``,
``expires_on``) are fixed so existing backing files keep loading.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator

FORMAT_VERSION = "1"

# RFC 3339 timestamps may carry nanoseconds; datetime stops at microseconds.
_SUBMICRO = re.compile(r"(\.\d{6})\d+")


def ttl_seconds(ttl: timedelta | float) -> float:
    """Normalise a TTL given as a timedelta or a number of seconds."""
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
    if not math.isfinite(seconds):
        raise ValueError(f"ttl must be finite, got {ttl!r}")
    if seconds < 0:
        raise ValueError(f"ttl must not be negative, got {ttl!r}")
    return seconds


class Entry(BaseModel):
    """A single stored value plus its expiration metadata.

    Attributes:
        value:      Opaque string payload.  Must be encodable as UTF-8.
        no_expire:  ``True`` if the entry never expires; ``expires_on`` is
                    then ignored.  Serialized as ``bool``.
        expires_on: Absolute expiry time (aware, UTC by default).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    value: StrictStr
    no_expire: StrictBool = Field(alias="bool")
    expires_on: datetime

    @field_validator("value")
    @classmethod
    def _encodable(cls, v: str) -> str:
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"value is not valid UTF-8 text: {exc.reason}") from exc
        return v

    @field_validator("expires_on", mode="before")
    @classmethod
    def _trim_precision(cls, v: Any) -> Any:
        # Timestamps are ISO-8601 strings on disk; numbers are not accepted.
        if isinstance(v, str):
            return _SUBMICRO.sub(r"\1", v)
        if isinstance(v, datetime):
            return v
        raise ValueError(f"expires_on must be an ISO-8601 timestamp, got {type(v).__name__}")

    @field_validator("expires_on")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @classmethod
    def for_ttl(cls, value: str, ttl: timedelta | float, now: datetime) -> Entry:
        """Build an entry written at *now*; a zero TTL means "never expires".

        Raises:
            ValueError: *ttl* is negative or not finite, the expiry falls
                outside the representable date range, or *value* cannot be
                encoded as UTF-8.
        """
        seconds = ttl_seconds(ttl)
        try:
            expires_on = now + timedelta(seconds=seconds)
        except OverflowError as exc:
            raise ValueError(f"ttl {ttl!r} puts expiry out of range") from exc
        return cls(value=value, no_expire=seconds == 0, expires_on=expires_on)

    def expired(self, now: datetime) -> bool:
        return not self.no_expire and now > self.expires_on


class Dataset(BaseModel):
    """Every entry of a store plus format version and mutation counter.

    ``seq`` is a write-generation marker: it only ever goes up, once per
    mutating call.
    """

    version: StrictStr = FORMAT_VERSION
    seq: StrictInt = Field(default=0, ge=0)
    pairs: dict[str, Entry] = Field(default_factory=dict)

    def lookup(self, key: str) -> Entry | None:
        return self.pairs.get(key)

    def put(self, key: str, entry: Entry) -> None:
        self.pairs[key] = entry

    def remove(self, key: str) -> None:
        self.pairs.pop(key, None)

    def bump(self) -> int:
        self.seq += 1
        return self.seq

    # ── serialization ────────────────────────────────────────

    def to_bytes(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes | str) -> Dataset:
        """Parse a backing-file payload.  Raises ``pydantic.ValidationError``."""
        return cls.model_validate_json(data)
