"""Run a selection of probes and render the results."""

from __future__ import annotations

import asyncio
import json
from typing import Dict, Iterable, List, Optional, Tuple

from modules.diagnostics.probes import EMBEDDING_PROBE, PROBE_DESCRIPTIONS, PROBES
from modules.diagnostics.results import TestResult
from modules.infra.logger import setup_logger
from modules.llm.client import ClientConfig

logger = setup_logger(__name__)


def select_probes(names: Optional[Iterable[str]] = None) -> List[str]:
    """Validate probe names and return them in registry order, without duplicates.

    Args:
        names: Probe names to run. None selects every probe.

    Raises:
        ValueError: If a name is not a registered probe.
    """
    if names is None:
        return list(PROBES)
    requested = set(names)
    unknown = sorted(requested - set(PROBES))
    if unknown:
        raise ValueError(
            f"Unknown probe(s): {', '.join(unknown)}. "
            f"Available: {', '.join(PROBES)}"
        )
    return [name for name in PROBES if name in requested]


async def run_probes(
    names: Optional[Iterable[str]] = None,
    *,
    model_id: Optional[str] = None,
    client_config: Optional[ClientConfig] = None,
    concurrent: bool = True,
) -> Dict[str, TestResult]:
    """Run the selected probes and collect their results.

    Args:
        names: Probe names to run (all when None).
        model_id: Generation model override. The embedding probe always uses
            the configured embedding model.
        client_config: Credential shared by every probe; each probe still
            builds its own client.
        concurrent: Run probes with asyncio.gather instead of one by one.

    Returns:
        Mapping of probe name to result, in registry order.
    """
    selected = select_probes(names)
    logger.info(
        "Running %d probe(s) %s: %s",
        len(selected),
        "concurrently" if concurrent else "sequentially",
        ", ".join(selected),
    )

    def _invoke(name: str):
        probe = PROBES[name]
        if name == EMBEDDING_PROBE:
            return probe(client_config=client_config)
        return probe(model_id, client_config=client_config)

    if concurrent:
        results = await asyncio.gather(*(_invoke(name) for name in selected))
    else:
        results = [await _invoke(name) for name in selected]
    return dict(zip(selected, results))


def summarize(results: Dict[str, TestResult]) -> Tuple[int, int]:
    """Return (passed, total)."""
    passed = sum(1 for result in results.values() if result.success)
    return passed, len(results)


def results_to_json(results: Dict[str, TestResult]) -> str:
    """Serialize results as a JSON object keyed by probe name."""
    return json.dumps(
        {name: result.to_dict() for name, result in results.items()},
        ensure_ascii=False,
        indent=2,
    )


def format_probe_report(results: Dict[str, TestResult], model_id: str) -> str:
    """Generate a plain-text report for a probe run.

    Returns:
        Formatted report string.
    """
    lines = ["=" * 80, f"Gemini API Probe Report ({model_id})", "=" * 80, ""]

    for name, result in results.items():
        status_str = "✓" if result.success else "✗"
        label = PROBE_DESCRIPTIONS.get(name, name)
        lines.append(f"  {status_str} {label}: {result.message}")
        if result.data is not None:
            for key, value in result.data.to_dict().items():
                lines.append(f"      {key}: {value}")

    passed, total = summarize(results)
    lines.append("")
    lines.append(f"Passed: {passed}/{total}")
    lines.append("=" * 80)

    return "\n".join(lines)
