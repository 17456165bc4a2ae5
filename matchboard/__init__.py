"""
MATCHBOARD - Resume-to-job match analytics

Turns a resume profile and its per-job compatibility scores into dashboard
analytics: summary statistics, skill frequency, score distribution, skill gaps
and rule-based recommendations.

Architecture:
- Intake Context: Loading and normalizing resume and score payloads
- Analytics Context: Pure aggregation and recommendation engine
- Reporting Context: Plain-text rendering of dashboard views
"""

__version__ = "0.1.0"
