"""
Plain-text dashboard report.

Renders a DashboardView as aligned text tables, one section per dashboard
panel, with the same empty-state messages the web dashboard shows.
"""

from matchboard.contexts.analytics.dashboard import DashboardView
from matchboard.contexts.reporting.logger import _log_debug
from matchboard.utils.report_formatter import Column, TableFormatter, format_bar, pluralize

REPORT_WIDTH = 80


def _add_profile_section(report: TableFormatter, view: DashboardView) -> None:
    profile = view.profile
    report.add_section_header(f"Resume Profile ({view.resume_id})")
    report.set_columns([Column("Field", 20), Column("Value", 59)])
    report.add_row(["Profile", profile.email or "-"])
    skills = pluralize(profile.skill_count, "skill")
    report.add_row(["Skills Identified", f"{skills} ({profile.skill_coverage})"])
    experience = f"{profile.experience_years:g} years"
    report.add_row(["Experience Level", f"{experience} ({profile.experience_level})"])
    report.add_row(["Analysis Date", (view.uploaded_at or "unknown")[:10]])
    report.add_row(["Jobs Analyzed", pluralize(profile.jobs_analyzed, "job")])
    report.add_blank_line()
    if profile.top_skills:
        report.add_text(f"Top skills: {', '.join(profile.top_skills)}")
    report.add_text(f"Experience match: {profile.experience_summary}")
    report.add_blank_line()


def _add_overview_section(report: TableFormatter, view: DashboardView) -> None:
    stats = view.stats
    report.add_section_header("Performance Overview")
    report.set_columns([Column("Average Score", 16), Column("Best Match", 16),
                        Column("Jobs Analyzed", 16), Column("Improvement", 16)])
    report.add_table_header().add_separator()
    report.add_row([f"{stats.average_score}%", f"{stats.best_score}%",
                    stats.total_jobs, f"+{stats.improvement}%"])
    report.add_blank_line()


def _add_top_skills_section(report: TableFormatter, view: DashboardView) -> None:
    report.add_section_header("Your Top Skills")
    if not view.top_skills:
        report.add_text("No skills found in resume").add_blank_line()
        return
    report.set_columns([Column("Skill", 30), Column("Relevance", 22), Column("%", 6, ">")])
    report.add_table_header().add_separator()
    for entry in view.top_skills:
        report.add_row([entry.name, format_bar(entry.frequency_percent),
                        f"{entry.frequency_percent}%"])
    report.add_blank_line()


def _add_missing_skills_section(report: TableFormatter, view: DashboardView) -> None:
    report.add_section_header("Skills to Improve")
    if not view.missing_skills:
        report.add_text("Analyze some jobs to see missing skills").add_blank_line()
        return
    report.set_columns([Column("Skill", 40), Column("Required by", 15, ">")])
    report.add_table_header().add_separator()
    for entry in view.missing_skills:
        report.add_row([entry.name, pluralize(entry.job_count, "job")])
    report.add_blank_line()


def _add_distribution_section(report: TableFormatter, view: DashboardView) -> None:
    report.add_section_header("Performance Distribution")
    if not view.distribution:
        report.add_text("No job analysis data available").add_blank_line()
        return
    report.set_columns([Column("Range", 22), Column("Jobs", 8, ">"), Column("", 2),
                        Column("Description", 40)])
    report.add_table_header().add_separator()
    for bucket in view.distribution:
        report.add_row([bucket.range_label, bucket.count, "", bucket.description])
    report.add_blank_line()


def _add_recent_scores_section(report: TableFormatter, view: DashboardView) -> None:
    if not view.recent_scores:
        return
    report.add_section_header("Recent Job Applications")
    report.set_columns([Column("Job", 26), Column("Company", 18), Column("Overall", 8, ">"),
                        Column("ATS", 6, ">"), Column("Skills", 7, ">"),
                        Column("Exp.", 6, ">")])
    report.add_table_header().add_separator()
    for score in view.recent_scores:
        report.add_row([score.job_title, score.company, f"{score.overall_score}%",
                        f"{score.ats_score}%", f"{score.skill_match_score}%",
                        f"{score.experience_score}%"])
    report.add_blank_line()


def _add_recommendations_section(report: TableFormatter, view: DashboardView) -> None:
    report.add_section_header("Personalized Recommendations")
    for index, recommendation in enumerate(view.recommendations, 1):
        report.add_text(f"{index}. {recommendation.title}")
        report.add_text(f"   {recommendation.description}")
    report.add_blank_line()


def render_dashboard_report(view: DashboardView, width: int = REPORT_WIDTH) -> str:
    """
    Render a dashboard view as a plain-text report.

    Args:
        view: Dashboard view from build_dashboard()
        width: Separator width in characters

    Returns:
        Report text
    """
    report = TableFormatter(total_width=width)

    _add_profile_section(report, view)
    _add_overview_section(report, view)
    _add_top_skills_section(report, view)
    _add_missing_skills_section(report, view)
    _add_distribution_section(report, view)
    _add_recent_scores_section(report, view)
    _add_recommendations_section(report, view)

    _log_debug(f"Rendered report for resume {view.resume_id} ({len(report.lines)} lines)")
    return report.render()
