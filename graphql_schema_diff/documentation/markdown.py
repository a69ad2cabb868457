"""
Markdown rendering of schema diff reports.
"""

from ..comparison import DiffType, SchemaDiffReport


def render_markdown_report(report: SchemaDiffReport) -> str:
    """Render a Markdown summary: breaking changes first, then every change by kind."""
    content = [
        "# Schema Comparison Report", "",
        f"**From:** {report.this_schema_name}",
        f"**To:** {report.other_schema_name}",
        f"**Generated:** {report.comparison_date.strftime('%Y-%m-%d %H:%M:%S')}", "",
        "## Summary", "",
        f"- **Total Changes:** {report.total_changes}",
        f"- **Breaking Changes:** {report.breaking_changes}",
        f"- **Non-Breaking Changes:** {report.non_breaking_changes}",
        f"- **Backward Compatible:** {'Yes' if report.is_backward_compatible else 'No'}",
        f"- **Compatibility Score:** {report.compatibility_score:.2%}", "",
    ]
    breaking = report.get_breaking_changes()
    if breaking:
        content.extend(["## Breaking Changes", "", "The following changes may break existing clients:", ""])
        for diff in breaking:
            content.append(f"- **{diff.diff_type.value}** `{diff.path or '-'}`: {diff.description}")
        content.append("")
    for diff_type in DiffType:
        changes = report.get_changes_by_type(diff_type)
        if not changes:
            continue
        content.extend([f"## {diff_type.value}", ""])
        for diff in changes:
            marker = "compatible" if diff.backward_compatible else "breaking"
            content.append(f"- ({marker}) {diff.description}")
        content.append("")
    return "\n".join(content)
