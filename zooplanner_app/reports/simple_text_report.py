"""
Simple text-based report builder for an enclosure analysis.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from zooplanner_app.config.rules import VIABLE_ENCLOSURE_TEMPLATE
from zooplanner_app.models import AnalysisResult, ViableEnclosure
from zooplanner_app.services.admission_rules import AdmissionEvaluation


def format_viable_enclosure(viable: ViableEnclosure) -> str:
    return VIABLE_ENCLOSURE_TEMPLATE.format(
        id=viable.enclosure_id,
        free=viable.free_space_after,
        total=viable.total_capacity,
    )


def build_analysis_payload(result: AnalysisResult) -> Dict[str, Any]:
    """Keeper-facing payload: {"recintosViaveis": [...]} or {"erro": "..."}."""
    if result.error is not None:
        return {"erro": result.error.message}
    return {"recintosViaveis": [format_viable_enclosure(v) for v in result.viable]}


def build_analysis_summary_text(species_id: Any, count: Any, result: AnalysisResult) -> str:
    lines: list[str] = []
    lines.append(f"Pedido: {count} x {species_id}")
    lines.append("")
    if result.error is not None:
        lines.append(f"Erro: {result.error.message}")
    else:
        lines.append("Recintos viáveis:")
        for viable in result.viable:
            lines.append(f"  {format_viable_enclosure(viable)}")
    return "\n".join(lines)


def build_explanation_text(verdicts: List[Tuple[int, AdmissionEvaluation]]) -> str:
    lines: list[str] = []
    for enclosure_id, evaluation in verdicts:
        status = "OK" if evaluation.admitted else "RECUSADO"
        lines.append(f"Recinto {enclosure_id}: {status}")
        for check in evaluation.checks:
            mark = "PASS" if check.passed else "FAIL"
            lines.append(f"  [{mark}] {check.code}: {check.message}")
    return "\n".join(lines)
