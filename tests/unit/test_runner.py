"""Unit tests for modules/diagnostics/runner.py."""

from __future__ import annotations

import json
from typing import Dict, List
from unittest.mock import AsyncMock, patch

import pytest

from modules.diagnostics.errors import FailureKind
from modules.diagnostics.probes import PROBES
from modules.diagnostics.results import (
    ConnectivityData,
    TestResult,
)
from modules.diagnostics.runner import (
    format_probe_report,
    results_to_json,
    run_probes,
    select_probes,
    summarize,
)
from modules.llm.client import ClientConfig


@pytest.fixture
def stub_probes():
    """Replace every registered probe with an AsyncMock returning success."""
    stubs: Dict[str, AsyncMock] = {
        name: AsyncMock(return_value=TestResult.ok(f"{name} ok")) for name in PROBES
    }
    with patch.dict("modules.diagnostics.runner.PROBES", stubs):
        yield stubs


class TestSelectProbes:
    @pytest.mark.unit
    def test_none_selects_all_in_registry_order(self):
        assert select_probes() == list(PROBES)

    @pytest.mark.unit
    def test_keeps_registry_order_and_drops_duplicates(self):
        assert select_probes(["embedding", "connect", "embedding"]) == ["connect", "embedding"]

    @pytest.mark.unit
    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown probe"):
            select_probes(["connect", "teleport"])


class TestRunProbes:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_runs_all_probes(self, stub_probes):
        results = await run_probes(model_id="gemini-2.5-pro")

        assert list(results) == list(PROBES)
        assert all(result.success for result in results.values())

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generation_model_not_passed_to_embedding(self, stub_probes):
        config = ClientConfig(api_key="k")

        await run_probes(["connect", "embedding"], model_id="gemini-2.5-pro", client_config=config)

        stub_probes["connect"].assert_awaited_once_with("gemini-2.5-pro", client_config=config)
        stub_probes["embedding"].assert_awaited_once_with(client_config=config)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sequential_runs_in_order(self, stub_probes):
        order: List[str] = []
        for name, stub in stub_probes.items():
            stub.side_effect = (
                lambda *args, _name=name, **kwargs: order.append(_name) or TestResult.ok(_name)
            )

        results = await run_probes(["vision", "connect"], concurrent=False)

        assert order == ["connect", "vision"]
        assert list(results) == ["connect", "vision"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_probe_runs_nothing(self, stub_probes):
        with pytest.raises(ValueError):
            await run_probes(["nope"])
        for stub in stub_probes.values():
            stub.assert_not_awaited()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_real_probes_without_key_all_fail(self, mock_env_no_api_keys):
        results = await run_probes()

        assert len(results) == len(PROBES)
        assert all(r.failure == FailureKind.CONFIGURATION for r in results.values())


class TestReporting:
    @pytest.fixture
    def results(self) -> Dict[str, TestResult]:
        return {
            "connect": TestResult.ok("Connected.", ConnectivityData(reply="pong")),
            "embedding": TestResult.fail("no values", FailureKind.MALFORMED_RESPONSE),
        }

    @pytest.mark.unit
    def test_summarize(self, results):
        assert summarize(results) == (1, 2)

    @pytest.mark.unit
    def test_summarize_empty(self):
        assert summarize({}) == (0, 0)

    @pytest.mark.unit
    def test_report_lists_each_probe(self, results):
        report = format_probe_report(results, "gemini-2.5-flash")
        assert "Gemini API Probe Report (gemini-2.5-flash)" in report
        assert "✓ Auth & connection: Connected." in report
        assert "reply: pong" in report
        assert "✗ Embedding: no values" in report
        assert "Passed: 1/2" in report

    @pytest.mark.unit
    def test_results_to_json(self, results):
        payload = json.loads(results_to_json(results))
        assert payload["connect"] == {
            "success": True,
            "message": "Connected.",
            "data": {"reply": "pong"},
        }
        assert payload["embedding"]["failure"] == "malformed_response"
