"""Quality checks that hold for every calculator and any input."""

import dataclasses
import math

import pytest

from indicator_metrics.engine import classify_indicators
from indicator_metrics.kpi_library.registry import get_all_calculators
from indicator_metrics.models.enums import IndicatorCategory
from indicator_metrics.normalization import monthly_equivalent

MALFORMED_INPUTS = [
    {},
    None,
    [],
    "Produtividade",
    42,
    {"baselineData": "not a mapping", "postIAData": 3},
    {"info_data": {"tipoIndicador": "Produtividade"}, "baselineData": {"pessoas": "x"}},
    {"info_data": {"tipoIndicador": "Produtividade"}, "baselineData": {"pessoas": [None, 1, {"tempoGasto": "abc"}]}},
    {"improvement_type": "speed", "baseline": {"tempoMedioEntregaAtual": "abc", "unidadeTempoEntrega": 5}},
    {"improvement_type": "margin_improvement", "baseline": {"receitaBrutaMensal": "Infinity"}},
    {"improvement_type": "satisfaction", "postIA": {"taxaChurnComIA": "NaN", "custoMedioTicket": ""}},
    {"improvement_type": "analytical_capacity", "baseline": {"camposQualitativos": [None, {"id": 1}]}},
    {"improvement_type": 7, "tipoIndicador": ["Velocidade"]},
]


def _numeric_fields(metrics):
    for f in dataclasses.fields(metrics):
        value = getattr(metrics, f.name)
        if isinstance(value, float) or (isinstance(value, int) and not isinstance(value, bool)):
            yield f.name, value


def _assert_finite(metrics):
    for name, value in _numeric_fields(metrics):
        assert math.isfinite(value), f"{type(metrics).__name__}.{name} = {value}"
    for row in getattr(metrics, "people", []):
        for name, value in _numeric_fields(row):
            assert math.isfinite(value), f"person.{name} = {value}"


class TestTotality:
    """Every calculator returns None or a metrics object, never raises."""

    @pytest.mark.parametrize("raw", MALFORMED_INPUTS)
    def test_malformed_input(self, raw):
        for definition in get_all_calculators():
            result = definition.calculate_fn(raw)
            if result is not None:
                assert result.category is definition.category
                _assert_finite(result)

    def test_dispatcher_survives_malformed_batch(self):
        results = classify_indicators(MALFORMED_INPUTS)
        assert len(results) == 8


class TestZeroGuard:
    """With every input missing, every ratio comes out as 0."""

    @pytest.mark.parametrize("category", list(IndicatorCategory))
    def test_empty_record_is_all_zeros(self, category):
        definition = next(c for c in get_all_calculators() if c.category is category)
        metrics = definition.calculate_fn({"improvement_type": category.value})
        assert metrics is not None
        for name, value in _numeric_fields(metrics):
            assert value == 0, f"{category.value}.{name} = {value}"

    def test_fixture_records_are_finite(self, category_records):
        for raw in category_records:
            for definition in get_all_calculators():
                result = definition.calculate_fn(raw)
                if result is not None:
                    _assert_finite(result)


class TestMutualExclusivity:
    AMBIGUOUS = [
        {"info_data": {"tipoIndicador": "Velocidade"}, "baselineData": {"tipo": "SATISFAÇÃO"}},
        {"baselineData": {"tipo": "PRODUTIVIDADE"}, "postIAData": {"tipo": "VELOCIDADE"}},
        {"improvement_type": "speed", "tipoIndicador": "Satisfação"},
        {"postIAData": {"tipo": "MELHORIA MARGEM"}, "improvement_type": "risk_reduction"},
    ]

    def _claims(self, raw):
        return [d.category for d in get_all_calculators() if d.calculate_fn(raw) is not None]

    def test_fixture_records(self, category_records):
        for raw in category_records:
            assert len(self._claims(raw)) == 1

    @pytest.mark.parametrize("raw", AMBIGUOUS)
    def test_at_most_one_calculator_claims(self, raw):
        assert len(self._claims(raw)) <= 1

    @pytest.mark.parametrize("raw", MALFORMED_INPUTS)
    def test_malformed_records(self, raw):
        assert len(self._claims(raw)) <= 1

    def test_dispatcher_matches_single_claim(self, category_records):
        results = classify_indicators(category_records + self.AMBIGUOUS)
        assert sum(len(items) for items in results.values()) == len(category_records) + len(self.AMBIGUOUS)


class TestProductivityClamp:
    @pytest.mark.parametrize("before,after", [(60, 30), (30, 60), (0, 45), (45, 0), (10, 10)])
    def test_savings_never_negative(self, productivity_record, before, after):
        productivity_record["baselineData"]["pessoas"][0]["tempoGasto"] = before
        productivity_record["postIAData"]["pessoas"][0]["tempoGasto"] = after
        definition = next(c for c in get_all_calculators() if c.category is IndicatorCategory.PRODUCTIVITY)
        metrics = definition.calculate_fn(productivity_record)
        for row in metrics.people:
            assert row.hh_saved >= 0
            assert row.cost_saved >= 0
            assert row.desired_hh_saved >= 0
            assert row.desired_cost_saved >= 0
        assert metrics.total_hours_saved >= 0


class TestPeriodIdempotence:
    @pytest.mark.parametrize("x", [0, 1, 2.5, 1234.5678, -3.5])
    def test_monthly_is_identity(self, x):
        assert monthly_equivalent(x, "Mensal") == x
        assert monthly_equivalent(x, "monthly") == x
