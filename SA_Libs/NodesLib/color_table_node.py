"""
Color Table Node for the Color Spectrum Analyzer.

Formats the leading records of a SpectrumReport as table rows for display.

Functions:
    format_color_table: Build display rows from ColorRecords
    render_color_table: Render rows as aligned plain text
    execute_color_table_node: Pipeline executor for color table nodes
    create_color_table_node: Helper to build a node dictionary
"""

from typing import Any, Dict, List, Sequence

from SA_Libs.constants import DEFAULT_TABLE_LIMIT, NODE_TYPE_COLOR_TABLE
from SA_Libs.SpectrumLib.color_models import ColorRecord
from SA_Libs.SpectrumLib.distribution_reporter import SpectrumReport

TABLE_COLUMNS = (
    ("rank", "#"),
    ("hex", "Hex"),
    ("rgb", "RGB"),
    ("color_name", "Band"),
    ("wavelength", "Wavelength"),
    ("percentage", "Share"),
    ("count", "Pixels"),
)


def format_color_table(
    records: Sequence[ColorRecord],
    limit: int = DEFAULT_TABLE_LIMIT,
) -> List[Dict[str, str]]:
    """
    Build display rows for the first `limit` records, keeping their order.

    Args:
        records: Records sorted by wavelength descending
        limit: Maximum number of rows

    Returns:
        One dict of display strings per row
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    rows = []
    for rank, record in enumerate(records[:limit], start=1):
        r, g, b = record.rgb
        rows.append({
            "rank": str(rank),
            "hex": record.hex.upper(),
            "rgb": f"rgb({r}, {g}, {b})",
            "color_name": record.color_name,
            "wavelength": f"{record.wavelength:.0f}nm",
            "percentage": f"{record.percentage:.2f}%",
            "count": str(record.count),
        })
    return rows


def render_color_table(rows: Sequence[Dict[str, str]]) -> str:
    widths = {
        key: max([len(title)] + [len(row[key]) for row in rows])
        for key, title in TABLE_COLUMNS
    }
    header = "  ".join(title.ljust(widths[key]) for key, title in TABLE_COLUMNS)
    lines = [header, "  ".join("-" * widths[key] for key, _ in TABLE_COLUMNS)]
    for row in rows:
        lines.append("  ".join(row[key].ljust(widths[key]) for key, _ in TABLE_COLUMNS))
    return "\n".join(line.rstrip() for line in lines)


def execute_color_table_node(node: Dict[str, Any], inputs: List[Any]) -> List[Dict[str, str]]:
    """
    Pipeline executor for color table nodes.

    Args:
        node: Node dictionary, optional 'limit' (default 20)
        inputs: Should contain exactly one element: a SpectrumReport

    Returns:
        Table rows from format_color_table

    Raises:
        ValueError: If inputs list is empty
        TypeError: If input is not a SpectrumReport
    """
    if not inputs:
        raise ValueError("Color table node requires 1 spectrum report input")

    report = inputs[0]
    if not isinstance(report, SpectrumReport):
        raise TypeError(f"Expected SpectrumReport, got {type(report)}")

    return format_color_table(report.records, int(node.get("limit", DEFAULT_TABLE_LIMIT)))


def create_color_table_node(node_id: str, source_id: str, limit: int = DEFAULT_TABLE_LIMIT) -> Dict[str, Any]:
    return {
        "id": node_id,
        "type": NODE_TYPE_COLOR_TABLE,
        "inputs": [source_id],
        "limit": limit,
    }
