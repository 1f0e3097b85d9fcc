"""Report templates for sun times output."""

from datetime import date, datetime
from pathlib import Path
from typing import Dict, Optional, Union

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, Template

HEADER_TEMPLATE = """\
{{ location.city }} {{ location.latitude | format_coord }},{{ location.longitude | format_coord }} ({{ location.timezone }})
{{ date | format_date }}"""

REPORT_TEMPLATE = """\
Sunrise                       {{ times.sunrise | slot }}
Sunset                        {{ times.sunset | slot }}
Solar noon                    {{ times.solar_noon | slot }}
Day length                    {{ times.day_length | slot }}
Twilight
- Civil (beg)                 {{ times.civil_twilight_begin | slot }}
- Civil (end)                 {{ times.civil_twilight_end | slot }}
- Nautical (beg)              {{ times.nautical_twilight_begin | slot }}
- Nautical (end)              {{ times.nautical_twilight_end | slot }}
- Astronomical (beg)          {{ times.astronomical_twilight_begin | slot }}
- Astronomical (end)          {{ times.astronomical_twilight_end | slot }}"""

DEFAULT_TEMPLATES = {
    "header.j2": HEADER_TEMPLATE,
    "report.j2": REPORT_TEMPLATE,
}


class ReportTemplates:
    """Manages the report templates.

    Built-in templates can be overridden by ``header.j2`` / ``report.j2``
    files in a templates directory.
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize report templates."""
        self.templates_dir = templates_dir

        loaders = [DictLoader(DEFAULT_TEMPLATES)]
        if templates_dir is not None:
            loaders.insert(0, FileSystemLoader(str(templates_dir)))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True
        )

        # Add custom filters
        self.env.filters['format_date'] = self._format_date
        self.env.filters['format_coord'] = self._format_coord
        self.env.filters['slot'] = self._slot

    def _format_date(self, date_obj: Union[date, str], format_str: str = "%A, %b %d, %Y") -> str:
        """Format date object."""
        if isinstance(date_obj, str):
            date_obj = datetime.strptime(date_obj, "%Y-%m-%d")
        return date_obj.strftime(format_str)

    def _format_coord(self, value: float, precision: int = 3) -> str:
        """Format a coordinate to fixed decimals."""
        return f"{value:.{precision}f}"

    def _slot(self, value: Optional[str]) -> str:
        """Render an unset value as an empty slot."""
        return "" if value is None else value

    def get_template(self, template_name: str) -> Template:
        """Get a specific template."""
        return self.env.get_template(f"{template_name}.j2")

    def render_header(self, context: Dict) -> str:
        """Render the location and date header."""
        return self.get_template("header").render(**context)

    def render_report(self, context: Dict) -> str:
        """Render the sun times body."""
        return self.get_template("report").render(**context)


# Global templates instance
templates = ReportTemplates()
