"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the demo listing:
- JSON and YAML for machine consumption
- ASCII table for terminals
"""

import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, Any]]) -> str:
    """Format demos as an ASCII table."""
    if not demos:
        return "No demos found."

    headers = ["NAME", "PATTERN", "DESCRIPTION"]
    rows = [[d.get("name", ""), d.get("title", ""), d.get("description", "")] for d in demos]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    def _line(cells: List[str]) -> str:
        return "  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [_line(headers), _line(["-" * w for w in widths])]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)
