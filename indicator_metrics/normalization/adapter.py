"""Map raw indicator payloads onto the canonical ``IndicatorRecord``.

Two generations of payload reach the engine: the legacy shape, with nested
``baselineData`` / ``postIAData`` / ``info_data`` objects and a human-readable
``tipoIndicador`` label, and the normalized shape, with flattened snake_case
keys and a machine ``improvement_type`` code. Both are resolved here, once,
so that the category calculators never look at alternate key names.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from indicator_metrics.models.enums import IMPROVEMENT_TYPE_LABELS, IndicatorCategory
from indicator_metrics.models.indicator import (
    IndicatorRecord,
    PersonPair,
    PersonSnapshot,
    Recurrence,
    Snapshots,
)

from .coercion import has_valid_value, to_number

# Candidate keys, most specific first.
_BASELINE_KEYS = ("baselineData", "baseline", "baseline_data")
_POST_CHANGE_KEYS = ("postIAData", "postIA", "post_ia_data")
_METADATA_KEYS = ("info_data", "infoData")

DEFAULT_INDICATOR_NAME = "Indicador sem nome"


def _first_mapping(record: Mapping[str, Any], keys: Iterable[str]) -> Mapping[str, Any]:
    for key in keys:
        value = record.get(key)
        if isinstance(value, Mapping):
            return MappingProxyType(dict(value))
    return MappingProxyType({})


def _first_present(*values: Any) -> Any:
    for value in values:
        if has_valid_value(value):
            return value
    return None


def resolve_snapshots(record: Any) -> Snapshots:
    """Locate the baseline, post-change and metadata sub-objects of a raw record.

    Each defaults to an empty mapping when no candidate key holds an object.
    """
    if not isinstance(record, Mapping):
        return Snapshots()
    return Snapshots(
        baseline=_first_mapping(record, _BASELINE_KEYS),
        post_change=_first_mapping(record, _POST_CHANGE_KEYS),
        metadata=_first_mapping(record, _METADATA_KEYS),
    )


def _category_labels(record: Mapping[str, Any], snaps: Snapshots) -> list[str]:
    code = record.get("improvement_type") or record.get("improvementType")
    if isinstance(code, str) and code.strip():
        code = IMPROVEMENT_TYPE_LABELS.get(code.strip(), code)

    return [
        candidate
        for candidate in (
            snaps.metadata.get("tipoIndicador"),
            snaps.baseline.get("tipo"),
            snaps.post_change.get("tipo"),
            code,
            record.get("tipoIndicador"),
        )
        if isinstance(candidate, str) and candidate.strip()
    ]


def resolve_category_label(record: Any, snapshots: Optional[Snapshots] = None) -> Optional[str]:
    """Return the raw category label of a record, or None.

    Resolution order: metadata ``tipoIndicador``, baseline ``tipo``,
    post-change ``tipo``, the ``improvement_type`` code (translated through
    ``IMPROVEMENT_TYPE_LABELS``; unknown codes are returned as-is), and
    finally a ``tipoIndicador`` set directly on the record.
    """
    if not isinstance(record, Mapping):
        return None
    labels = _category_labels(record, snapshots or resolve_snapshots(record))
    return labels[0] if labels else None


def resolve_category(record: Any, snapshots: Optional[Snapshots] = None) -> Optional[IndicatorCategory]:
    """Resolve the record's category as an enum member (None if unrecognized).

    Candidates are tried in ``resolve_category_label`` order and the first
    recognized one wins, so an unrelated metadata label does not hide a
    valid snapshot tag or code.
    """
    if not isinstance(record, Mapping):
        return None
    for label in _category_labels(record, snapshots or resolve_snapshots(record)):
        category = IndicatorCategory.from_label(label)
        if category is not None:
            return category
    return None


def _recurrence(raw: Any) -> Recurrence:
    if not isinstance(raw, Mapping):
        return Recurrence()
    period = raw.get("periodo")
    return Recurrence(
        quantity=to_number(raw.get("quantidade")),
        period=period if isinstance(period, str) and period else "Mensal",
    )


def _person(raw: Mapping[str, Any], position: int) -> PersonSnapshot:
    person_id = raw.get("id")
    name = raw.get("nome")
    return PersonSnapshot(
        id=str(person_id) if person_id not in (None, "") else None,
        name=name if isinstance(name, str) and name.strip() else f"Pessoa {position}",
        role=str(raw.get("cargo") or ""),
        hourly_rate=to_number(raw.get("valorHora")),
        time_spent_minutes=to_number(raw.get("tempoGasto")),
        actual_frequency=_recurrence(raw.get("frequenciaReal")),
        desired_frequency=_recurrence(raw.get("frequenciaDesejada")),
    )


def _people(raw: Any) -> list[PersonSnapshot]:
    if not isinstance(raw, (list, tuple)):
        return []
    return [
        _person(item, position)
        for position, item in enumerate(raw, start=1)
        if isinstance(item, Mapping)
    ]


def pair_people(baseline_people: Any, post_change_people: Any) -> list[PersonPair]:
    """Pair each baseline person with the post-change person sharing its id.

    Unmatched baseline people (including those without an id) are paired
    with themselves and flagged ``matched=False``. Post-change people with
    no baseline counterpart are ignored; output order follows the baseline.
    When a post-change id repeats, its first entry is used.
    """
    before = _people(baseline_people)
    after_by_id: dict[str, PersonSnapshot] = {}
    for person in _people(post_change_people):
        if person.id is not None:
            after_by_id.setdefault(person.id, person)

    pairs: list[PersonPair] = []
    for person in before:
        counterpart = after_by_id.get(person.id) if person.id is not None else None
        if counterpart is None:
            pairs.append(PersonPair(before=person, after=person, matched=False))
        else:
            pairs.append(PersonPair(before=person, after=counterpart, matched=True))
    return pairs


def _resolve_implementation_cost(record: Mapping[str, Any], snaps: Snapshots) -> float:
    raw = _first_present(
        record.get("implementation_cost"),
        record.get("custoImplementacao"),
        snaps.post_change.get("custoImplementacao"),
        snaps.post_change.get("custoTotalImplementacao"),
    )
    return to_number(raw)


def normalize_record(record: Any, implementation_cost: Optional[float] = None) -> IndicatorRecord:
    """Build the canonical ``IndicatorRecord`` for a raw payload.

    ``implementation_cost``, when given, comes from the external cost records
    and takes precedence over any cost embedded in the payload. Non-mapping
    input yields an empty record with no category.
    """
    if not isinstance(record, Mapping):
        return IndicatorRecord(id=None, name=DEFAULT_INDICATOR_NAME, category=None)

    snaps = resolve_snapshots(record)
    raw_id = record.get("id")
    name = _first_present(record.get("name"), record.get("nome"), snaps.metadata.get("nome"))
    description = _first_present(
        record.get("description"), record.get("descricao"), snaps.metadata.get("descricao")
    )
    if implementation_cost is None:
        cost = _resolve_implementation_cost(record, snaps)
    else:
        cost = to_number(implementation_cost)

    return IndicatorRecord(
        id=str(raw_id) if raw_id not in (None, "") else None,
        name=str(name) if name is not None else DEFAULT_INDICATOR_NAME,
        category=resolve_category(record, snaps),
        snapshots=snaps,
        description=str(description) if description is not None else "",
        implementation_cost=cost,
    )


def as_indicator(record: Union[IndicatorRecord, Mapping[str, Any], Any]) -> IndicatorRecord:
    """Pass canonical records through; normalize anything else."""
    if isinstance(record, IndicatorRecord):
        return record
    return normalize_record(record)
