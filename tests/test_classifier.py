"""Tests for the compliance classifier."""

from __future__ import annotations

import logging

import pytest

from baseline_guard.classifier import classify, is_compliant, partition
from baseline_guard.models import ComplianceTarget, FeatureRecord
from baseline_guard.store import FeatureStore

TARGETS = ["widely", "newly", "2019", "2021", "2023", "2030"]


def _target(text: str, fail_on_newly: bool = False) -> ComplianceTarget:
    return ComplianceTarget.parse(text, fail_on_newly=fail_on_newly)


def _record(**fields) -> FeatureRecord:
    raw = {"status": fields}
    return FeatureRecord.from_raw("feature", raw)


@pytest.mark.parametrize("fail_on_newly", [False, True])
@pytest.mark.parametrize("text", TARGETS)
def test_partition_covers_store_exactly(store: FeatureStore, text: str, fail_on_newly: bool) -> None:
    compliant, non_compliant = partition(store, _target(text, fail_on_newly))
    assert compliant.isdisjoint(non_compliant)
    assert compliant | non_compliant == store.all_ids()


@pytest.mark.parametrize("text", TARGETS)
def test_override_never_grows_compliant_set(store: FeatureStore, text: str) -> None:
    plain = classify(store, _target(text))
    strict = classify(store, _target(text, fail_on_newly=True))
    assert strict <= plain
    for feature_id in plain - strict:
        assert store.lookup(feature_id).baseline_status == "low"


def test_widely_and_newly(store: FeatureStore) -> None:
    assert classify(store, _target("widely")) == {"grid", "gap", "structured-clone"}
    assert classify(store, _target("newly")) == {
        "grid",
        "gap",
        "structured-clone",
        "has",
        "container-queries",
        "oklab",
        "backdrop-filter",
        "array-group",
    }


def test_low_status_is_newly_but_not_widely() -> None:
    record = _record(baseline="low", baseline_low_date="2023-12-19")
    assert not is_compliant(record, _target("widely"))
    assert is_compliant(record, _target("newly"))
    assert not is_compliant(record, _target("newly", fail_on_newly=True))


def test_year_rule_uses_low_date() -> None:
    record = _record(baseline="low", baseline_low_date="2021-03-01")
    assert is_compliant(record, _target("2021"))
    assert not is_compliant(record, _target("2020"))


def test_year_rule_accepts_high_date_alone() -> None:
    record = _record(baseline="high", baseline_high_date="2019-06-01")
    assert is_compliant(record, _target("2019"))
    assert not is_compliant(record, _target("2018"))


def test_high_without_dates_is_not_compliant_by_year() -> None:
    record = _record(baseline="high")
    assert is_compliant(record, _target("widely"))
    assert not is_compliant(record, _target("2030"))


def test_override_applies_to_year_targets() -> None:
    record = _record(baseline="low", baseline_low_date="2021-03-01")
    assert not is_compliant(record, _target("2024", fail_on_newly=True))


@pytest.mark.parametrize("text", TARGETS)
def test_feature_without_status_or_dates_is_never_compliant(text: str) -> None:
    record = _record(baseline=False)
    assert not is_compliant(record, _target(text))


def test_year_target_on_shared_snapshot(store: FeatureStore) -> None:
    # gap carries ranged dates ("≤2021-04-26")
    assert classify(store, _target("2021")) == {"grid", "gap"}


def test_empty_compliant_set_logs_advisory(store: FeatureStore, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="baseline_guard.classifier"):
        compliant, non_compliant = partition(store, _target("1999"))
    assert compliant == frozenset()
    assert non_compliant == store.all_ids()
    assert "No features are compliant with target '1999'" in caplog.text
