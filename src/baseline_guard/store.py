"""Read-only lookup of feature records built from a database snapshot."""

from __future__ import annotations

import logging
from types import MappingProxyType
from collections.abc import Iterator, Mapping
from typing import Any

from .models import FeatureRecord
from .result import DataLoadError
from .validators.snapshot import features_of, validate_snapshot

logger = logging.getLogger(__name__)

# Entries that only redirect to other features in the web-features data set.
_REDIRECT_KINDS = {"moved", "split"}


class FeatureStore:
    """Immutable mapping of feature id to FeatureRecord.

    Besides lookup by id, the store resolves browser-compat-data keys (as
    emitted by the scanners) to the feature that lists them.
    """

    __slots__ = ("_records", "_compat_index")

    def __init__(self, records: Mapping[str, FeatureRecord]) -> None:
        self._records = MappingProxyType(dict(records))
        compat_index: dict[str, str] = {}
        for record in self._records.values():
            for key in record.compat_keys:
                compat_index.setdefault(key, record.id)
        self._compat_index = MappingProxyType(compat_index)

    @classmethod
    def load(cls, raw_snapshot: Any) -> FeatureStore:
        """Normalise a raw snapshot into a store.

        Raises:
            DataLoadError: If the snapshot is missing or not a mapping of
                feature records.
        """
        if raw_snapshot is None:
            raise DataLoadError("Feature snapshot is missing")

        features = features_of(raw_snapshot)
        if not isinstance(features, Mapping):
            raise DataLoadError(
                f"Feature snapshot must be a mapping, got {type(features).__name__}"
            )
        validate_snapshot(dict(features))

        records: dict[str, FeatureRecord] = {}
        for feature_id, raw in features.items():
            if raw.get("kind") in _REDIRECT_KINDS:
                logger.debug("Skipping redirect entry %s", feature_id)
                continue
            records[str(feature_id)] = FeatureRecord.from_raw(str(feature_id), raw)

        logger.info("Loaded %d feature records", len(records))
        return cls(records)

    def lookup(self, feature_id: str) -> FeatureRecord | None:
        return self._records.get(feature_id)

    def all_ids(self) -> frozenset[str]:
        return frozenset(self._records)

    def resolve(self, key: str) -> str | None:
        """Return the feature id for a feature id or compat key, or None."""
        if key in self._records:
            return key
        return self._compat_index.get(key)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._records

    def __iter__(self) -> Iterator[FeatureRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
