"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for violations, layer assignments and dependencies
- List formatting for plain terminal output
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "violations" in data:
        return format_report_table(data)
    elif isinstance(data, dict) and "layers" in data:
        return format_layers_table(data["layers"])
    elif isinstance(data, dict) and "dependencies" in data:
        return format_dependencies_table(data["dependencies"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "violations" in data:
        return format_report_list(data)
    elif isinstance(data, dict) and "layers" in data:
        return "\n".join(f"{module}: {layer or '-'}" for module, layer in data["layers"].items())
    elif isinstance(data, dict) and "dependencies" in data:
        return "\n".join(
            f"{dep['origin']}:{dep['line']} -> {dep['target']}" for dep in data["dependencies"]
        )
    else:
        return json.dumps(data, indent=2, default=str)


def format_report_table(report: Dict[str, Any]) -> str:
    """Format a check report as a violations table followed by a summary."""
    console = Console(width=160, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        violations = report.get("violations", [])
        if violations:
            table = Table(show_header=True, header_style="bold magenta", title="Violations")
            table.add_column("Module", style="cyan")
            table.add_column("Line", justify="right")
            table.add_column("Depends on", style="red")
            table.add_column("From layer", style="green")
            table.add_column("To layer", style="yellow")
            for violation in violations:
                table.add_row(
                    violation["origin"],
                    str(violation["line"]),
                    violation["target"],
                    violation["origin_layer"],
                    violation["target_layer"],
                )
            console.print(table)

        for module, layers in report.get("ambiguous_modules", {}).items():
            console.print(f"Module {module} belongs to several layers: {', '.join(layers)}", markup=False)
        for layer in report.get("empty_layers", []):
            console.print(f"Layer '{layer}' contains no module", markup=False)
        for skipped in report.get("skipped_modules", []):
            console.print(f"Skipped {skipped['path']}: {skipped['reason']}", markup=False)

        console.print(_summary(report), markup=False)

    return capture.get()


def format_report_list(report: Dict[str, Any]) -> str:
    """Format a check report as plain lines."""
    lines = [report.get("rule", "")]
    lines.extend(violation["message"] for violation in report.get("violations", []))
    for module, layers in report.get("ambiguous_modules", {}).items():
        lines.append(f"Module {module} belongs to several layers: {', '.join(layers)}")
    for layer in report.get("empty_layers", []):
        lines.append(f"Layer '{layer}' contains no module")
    for skipped in report.get("skipped_modules", []):
        lines.append(f"Skipped {skipped['path']}: {skipped['reason']}")
    lines.append(_summary(report))
    return "\n".join(lines)


def format_layers_table(layers: Dict[str, Any]) -> str:
    """Format a module to layer assignment."""
    if not layers:
        return "No modules found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Module", style="cyan")
    table.add_column("Layer", style="green")
    for module, layer in layers.items():
        table.add_row(module, layer or "-")
    return _render(table)


def format_dependencies_table(dependencies: List[Dict[str, Any]]) -> str:
    """Format a dependency listing."""
    if not dependencies:
        return "No dependencies found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Module", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Target", style="green")
    table.add_column("Kind")
    for dependency in dependencies:
        kind = dependency["kind"]
        if dependency.get("type_checking"):
            kind += " (TYPE_CHECKING)"
        table.add_row(dependency["origin"], str(dependency["line"]), dependency["target"], kind)
    return _render(table)


def _summary(report: Dict[str, Any]) -> str:
    status = "PASSED" if report.get("passed") else "FAILED"
    return (
        f"{status}: {len(report.get('violations', []))} violation(s) in "
        f"{report.get('modules_scanned', 0)} module(s), "
        f"{report.get('dependencies_analysed', 0)} dependencies analysed"
    )


def _render(table: Table) -> str:
    console = Console(width=160, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
