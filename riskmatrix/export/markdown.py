"""
Markdown Export - Flat factor rows and a GitHub-flavored markdown table.
"""

from __future__ import annotations

from riskmatrix.models.assessment_models import Assessment, ExportRow, RiskFactor
from riskmatrix.models.rating_models import Axis, rating_label_for

MARKDOWN_HEADER = "| Type | Category | Explanation | Risk Rating |\n| --- | --- | --- | --- |\n"


def _label_of(axis: Axis, factor: RiskFactor) -> str:
    if factor.rating_label:
        return factor.rating_label
    return rating_label_for(axis, factor.categories, factor.rating) or str(factor.rating)


def export_rows(assessment: Assessment) -> list[ExportRow]:
    """One row per factor, likelihood factors first, entry order preserved."""
    rows: list[ExportRow] = []
    for axis in (Axis.LIKELIHOOD, Axis.SEVERITY):
        for factor in assessment.factors(axis):
            rows.append(
                ExportRow(
                    axis=axis,
                    categories=factor.categories,
                    explanation=factor.explanation,
                    rating_label=_label_of(axis, factor),
                    rating=factor.rating,
                )
            )
    return rows


def _cell(text: str) -> str:
    # Keep each factor on one table row
    return text.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


def format_row(row: ExportRow) -> str:
    categories = ", ".join(row.categories)
    return (
        f"| {row.axis.display_name} | {_cell(categories)} | {_cell(row.explanation)} "
        f"| {row.rating_label} ({row.rating}) |"
    )


def generate_markdown_table(assessment: Assessment) -> str:
    """
    Render the assessment's factors as a markdown table.

    Header: | Type | Category | Explanation | Risk Rating |
    Rows:   | Likelihood | Financial, Compliance | ... | Possible (3) |
    """
    return MARKDOWN_HEADER + "\n".join(format_row(row) for row in export_rows(assessment))
