"""
Diagnose Command - Why is a flow off target?

Standardized output version.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

import click
from pydantic import BaseModel, Field

from ...analysis.diagnosis import DiagnosisAnalyzer
from ...core.lookup import LookupService
from ...core.types import FlowType
from ..renderers import JsonRenderer
from ..utils import current_settings, echo_error, load_graph, open_plan_repository

logger = logging.getLogger(__name__)


# --- API Models ---
class DiagnosisResponse(BaseModel):
    flow_type: str
    root: Optional[Dict[str, Any]] = None
    below_target: List[str] = Field(default_factory=list)
    below_target_count: int = 0
    actionable: List[Dict[str, Any]] = Field(default_factory=list)


@click.command()
@click.option("--flow", type=click.Choice([f.value for f in FlowType]),
              default=None, help="Flow to diagnose  [default: from config]")
@click.option("-d", "--db", "db_path", default=None,
              help="Action-plan database  [default: from config]")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def diagnose(flow: Optional[str], db_path: Optional[str], as_json: bool):
    """
    Explain which actionable indicators drag a flow below target.
    """
    renderer = JsonRenderer("diagnose")
    error_to_report = None
    response_data = None

    flow = flow or current_settings().default_flow.value

    try:
        plans = open_plan_repository(db_path)
        analyzer = DiagnosisAnalyzer(load_graph(), plans=plans, lookup=LookupService())
        response_data = DiagnosisResponse(**analyzer.diagnose(FlowType(flow)))
    except Exception as e:
        logger.debug("Diagnosis failed", exc_info=True)
        error_to_report = e

    if error_to_report:
        if as_json:
            renderer.render_error(error_to_report)
        else:
            echo_error(f"Diagnosis failed: {error_to_report}")
        sys.exit(1)

    if as_json:
        renderer.render_success(response_data)
        return

    click.echo(format_diagnosis(response_data))


def format_diagnosis(result: DiagnosisResponse) -> str:
    lines = []
    root = result.root
    if root:
        color = "red" if root["status"] == "below" else "green"
        lines.append(click.style(
            f"{root['name']}: {root['value']} / {root['target']} ({root['variation']})",
            fg=color, bold=True,
        ))
    lines.append(f"{result.below_target_count} indicators below target in '{result.flow_type}'")

    if not result.actionable:
        lines.append("No actionable indicator is below target.")
        return "\n".join(lines)

    for item in result.actionable:
        lines.append("")
        lines.append(click.style(f"▶ {item['name']} ({item['variation']})", fg="yellow", bold=True))
        if item["chain_to_root"]:
            lines.append("  Chain: " + " → ".join(item["chain_to_root"]))
        for rec in item["recommendations"]:
            lines.append(f"  • [{rec['priority']}] {rec['title']}")
        for plan in item["action_plans"]:
            lines.append(f"  ☐ {plan['id']}: {plan['title']} ({plan['status']})")
    return "\n".join(lines)
