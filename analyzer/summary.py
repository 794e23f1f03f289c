"""Issue and audit totals across categories."""

from analyzer.models import CategoryReports, Severity, Summary


def calculate_summary(reports: CategoryReports) -> Summary:
    """Sum counts over the five categories.

    Manual, informative and not-applicable audits are left out of the audit
    totals.
    """
    total_issues = critical_issues = passed_audits = failed_audits = 0

    for _category, report in reports.items():
        total_issues += len(report.issues)
        critical_issues += report.count_by_severity(Severity.CRITICAL)
        passed_audits += report.audit_counts.passed
        failed_audits += report.audit_counts.failed

    return Summary(
        total_issues=total_issues,
        critical_issues=critical_issues,
        total_audits=passed_audits + failed_audits,
        passed_audits=passed_audits,
        failed_audits=failed_audits,
    )
