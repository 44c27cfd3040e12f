"""Insights orchestration: loads a ledger snapshot and derives insights."""

import logging
from datetime import date
from typing import Optional

from finsight.database.base import LedgerLoader
from finsight.domain.budget_performance import analyze_budget_performance
from finsight.domain.entities import InsightsReport
from finsight.domain.errors import INSIGHTS_FAILED, InsightsGenerationError
from finsight.domain.recommendations import generate_alerts, generate_recommendations
from finsight.domain.spending import analyze_spending_patterns
from finsight.domain.summary import generate_financial_summary
from finsight.utils.date_parser import month_key, trailing_window

logger = logging.getLogger(__name__)

WINDOW_MONTHS = 6


class InsightsService:
    """Service for generating financial insights for a user."""

    def __init__(self, loader: LedgerLoader):
        """Initialize insights service.

        Args:
            loader: Source of ledger snapshots
        """
        self.loader = loader

    def generate_insights(
        self, user_id: str, today: Optional[date] = None
    ) -> InsightsReport:
        """Generate insights for a user from the trailing window.

        Args:
            user_id: Owner of the ledger
            today: Reference date; defaults to the current date

        Returns:
            InsightsReport built from a single snapshot

        Raises:
            InsightsGenerationError: If loading or analysis fails. The
                original exception is chained as the cause.
        """
        if today is None:
            today = date.today()
        from_date, to_date = trailing_window(WINDOW_MONTHS, today)
        period = month_key(today)

        try:
            entries = self.loader.load_window(user_id, from_date, to_date)
            budgets = self.loader.load_current_budgets(user_id, period)
            logger.debug(
                "Loaded %d transactions and %d budgets for %s (%s to %s)",
                len(entries),
                len(budgets),
                user_id,
                from_date,
                to_date,
            )

            spending_patterns = analyze_spending_patterns(entries)
            budget_insights = analyze_budget_performance(entries, budgets)
            summary = generate_financial_summary(entries, period)
            recommendations = generate_recommendations(
                spending_patterns, budget_insights, summary
            )
            alerts = generate_alerts(budget_insights, summary)
        except Exception as e:
            logger.exception("Error generating insights for %s", user_id)
            raise InsightsGenerationError(INSIGHTS_FAILED) from e

        return InsightsReport(
            spending_patterns=tuple(spending_patterns),
            budget_insights=tuple(budget_insights),
            financial_summary=summary,
            recommendations=tuple(recommendations),
            alerts=tuple(alerts),
        )
