"""Tests for audit hooks -- calculation audit entries."""

import logging

import pytest

from indicator_metrics.hooks.audit_hooks import log_calculation, summarize_metrics
from indicator_metrics.kpi_library.productivity import calc_productivity
from indicator_metrics.kpi_library.revenue import calc_revenue_increase
from indicator_metrics.normalization import normalize_record


class TestAuditHooks:
    def test_entry_has_expected_fields(self, productivity_record):
        metrics = calc_productivity(normalize_record(productivity_record, implementation_cost=900))
        entry = log_calculation("ind-prod", "productivity", metrics)
        assert entry["indicator_id"] == "ind-prod"
        assert entry["category"] == "productivity"
        assert entry["timestamp"].endswith("+00:00")
        assert entry["summary"] == {
            "annual_benefit": pytest.approx(1800),
            "implementation_cost": 900,
            "roi": pytest.approx(100),
            "payback_months": pytest.approx(6),
        }

    def test_summary_skips_fields_a_category_lacks(self, revenue_record):
        summary = summarize_metrics(calc_revenue_increase(revenue_record))
        assert set(summary) == {"annual_benefit"}

    def test_missing_result(self):
        entry = log_calculation(None, "satisfaction")
        assert entry["summary"] is None
        assert entry["indicator_id"] is None

    def test_logs_info_line(self, caplog, productivity_record):
        metrics = calc_productivity(productivity_record)
        with caplog.at_level(logging.INFO, logger="indicator_metrics.hooks.audit_hooks"):
            log_calculation("ind-9", "productivity", metrics)
        assert "Calculated productivity for indicator ind-9" in caplog.text
        assert "'roi': 0.0" in caplog.text
