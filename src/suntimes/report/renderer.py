"""Render sun times reports as fixed-column text."""

from datetime import date
from typing import Optional, TextIO, Union

from ..config.templates import ReportTemplates, templates
from ..core.models import Location, TimeOfDayReport


class ReportRenderer:
    """Format a decoded report for the terminal."""

    def __init__(self, report_templates: Optional[ReportTemplates] = None):
        self.templates = report_templates or templates

    def render(self, location: Location, on_date: Union[date, str], report: TimeOfDayReport) -> str:
        """Render the full report.

        Args:
            location: Location shown in the header
            on_date: Report date, a date or a YYYY-MM-DD string
            report: Decoded sun times

        Returns:
            Report text ending with a newline
        """
        context = {"location": location, "date": on_date, "times": report}
        header = self.templates.render_header(context)
        body = self.templates.render_report(context)
        return f"{header}\n\n{body}\n"

    def write(self, stream: TextIO, location: Location, on_date: Union[date, str], report: TimeOfDayReport) -> None:
        """Render the report and write it to a stream."""
        stream.write(self.render(location, on_date, report))
