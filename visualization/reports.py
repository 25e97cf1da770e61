"""
Text reports shown next to the ASCII renders.

This module provides:
    • format_line_sets(line_sets)
    • format_relationship(result)
    • format_line_set_report(report)
    • format_quadrilateral(result)
"""

from typing import List, Sequence

from classifiers.line_relationship import LineSetReport, Relationship, RelationshipResult
from models.line import Line
from models.quadrilateral import QuadrilateralResult, ShapeType


SHAPE_VERDICTS = {
    ShapeType.SQUARE: "The shape you have chosen is a square! (all sides equal and all angles 90 degree)",
    ShapeType.RECTANGLE: "The shape you have chosen is a rectangle! (opposite sides equal and all angles 90 degree)",
    ShapeType.RHOMBUS: "The shape you have chosen is a rhombus! (all sides equal but angles aren't 90 degree)",
    ShapeType.PARALLELOGRAM: "The shape you have chosen is a parallelogram! (opposite sides are equal but angles aren't 90 degree)",
    ShapeType.TRAPEZOID: "The shape you have chosen is a trapezoid! (there is only one pair of parallel sides)",
    ShapeType.IRREGULAR: "Looks like the shape you have chosen is an irregular quadrilateral!",
    ShapeType.UNDETERMINED: "Could not determine the shape: fewer than 4 corner points were found.",
}


def _section(title: str) -> List[str]:
    return [title, "-" * len(title)]


def _fixed(value: float) -> str:
    """3-decimal text; values that round to zero never show a minus sign."""
    text = f"{value:.3f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


# ---------------------------------------------------------------------
#  Line listings
# ---------------------------------------------------------------------

def format_line_sets(line_sets: Sequence[Sequence[Line]]) -> str:
    """
    Line Set 1
    _______________________
    1x + 0y = 4
    ...
    """
    out = []
    for i, lines in enumerate(line_sets, start=1):
        out.append(f"Line Set {i}")
        out.append("_" * 23)
        out.extend(str(ln) for ln in lines)
        out.append("")
    return "\n".join(out)


# ---------------------------------------------------------------------
#  Two lines
# ---------------------------------------------------------------------

def format_relationship(result: RelationshipResult) -> str:
    match result.label:
        case Relationship.PARALLEL:
            return "The lines are parallel."
        case Relationship.PERPENDICULAR:
            verdict = "The lines are perpendicular."
        case _:
            verdict = "The lines are neither parallel nor perpendicular."

    p = result.intersection
    return f"{verdict}\nThe lines intersect at point: ({_fixed(p.x)}, {_fixed(p.y)})"


# ---------------------------------------------------------------------
#  Four lines
# ---------------------------------------------------------------------

def format_line_set_report(report: LineSetReport) -> str:
    out = _section("Information about the lines:")
    for i, slope in enumerate(report.slopes, start=1):
        if slope is None:
            out.append(f"Line {i}: Vertical line")
        else:
            out.append(f"Line {i}: Slope = {_fixed(slope)}")

    out.append("")
    out.extend(_section("Parallel Lines:"))
    if report.parallel_pairs:
        out.extend(f"Lines {i + 1} and {j + 1} are parallel" for i, j in report.parallel_pairs)
    else:
        out.append("No parallel lines found.")

    out.append("")
    out.extend(_section("Perpendicular Lines:"))
    if report.perpendicular_pairs:
        out.extend(f"Lines {i + 1} and {j + 1} are perpendicular" for i, j in report.perpendicular_pairs)
    else:
        out.append("No perpendicular lines found.")

    return "\n".join(out)


def format_quadrilateral(result: QuadrilateralResult) -> str:
    out = _section("Shape Analysis:")
    if result.side_lengths:
        lengths = " ".join(_fixed(length) for length in result.side_lengths)
        out.append(f"The side lengths are: {lengths}")
    out.append(SHAPE_VERDICTS[result.shape])
    return "\n".join(out)
