#!/usr/bin/env python3
"""
Basic Usage Example - Capital Tracker

This script demonstrates the basic usage of the capital tracker with a
temporary database. It shows how to:
- Open a session and subscribe to changes
- Record daily capital entries (same-day entries replace each other)
- Read moving averages, the trendline and goal progress
- Project the chart into plot coordinates

Run: python examples/basic_usage.py
"""

import tempfile
from datetime import date, timedelta
from pathlib import Path

from capital_tracker.chart.models import ChartOptions, PlotSize
from capital_tracker.logging import configure_logging
from capital_tracker.session import CapitalTracker, ChangeEvent


def print_change(event: ChangeEvent) -> None:
    """Print every change notification."""
    print(f"  [{event.kind}] {len(event.state.entries)} entries")


def main() -> None:
    """Run the walkthrough."""
    configure_logging(level="WARNING")

    with tempfile.TemporaryDirectory() as tmp:
        tracker = CapitalTracker.open(Path(tmp) / "demo.db")
        tracker.subscribe(print_change)

        print("📝 Recording entries...")
        start = date(2026, 1, 1)
        for offset, amount in enumerate([12000, 12500, 12300, 13100, 13800]):
            tracker.upsert_entry(start + timedelta(days=offset * 3), amount)

        # Same day again: replaces the earlier value
        tracker.upsert_entry(start, 11800)

        print("\n📈 Analytics")
        latest = tracker.entries[-1]
        print(f"  7-entry average at {latest.date}: {tracker.format_amount(tracker.moving_average(latest, 7))}")
        trend = tracker.trendline()
        if trend is not None:
            print(f"  Trend: {trend.slope:+.2f} per entry, starting at {trend.intercept:.2f}")

        print("\n🎯 Goal")
        tracker.update_target(15000, date(2026, 6, 30))
        progress = tracker.goal_progress()
        if progress is not None:
            print(f"  {progress.percent:.1f}% of {tracker.formatted_target_amount} "
                  f"by {tracker.formatted_target_date}, "
                  f"{tracker.format_amount(progress.remaining)} to go")

        print("\n🧾 Recent entries")
        for item in tracker.recent_changes():
            change = f" ({item.change_text})" if item.change_text else ""
            print(f"  {item.date_text}: {item.amount_text}{change}")

        print("\n📊 Chart")
        chart = tracker.project_chart(PlotSize(width=600, height=280),
                                      ChartOptions(show_goal=True, moving_average_window=7))
        for marker in chart.markers:
            print(f"  ({marker.position.x:6.1f}, {marker.position.y:6.1f}) {marker.tone.value}")
        print("  Axis: " + ", ".join(label.text for label in chart.axis_labels))

        # Reopen from disk to show the snapshot round trip
        reopened = CapitalTracker.open(Path(tmp) / "demo.db")
        print(f"\n💾 Reopened session has {len(reopened.entries)} entries in {reopened.currency.value}")


if __name__ == "__main__":
    main()
