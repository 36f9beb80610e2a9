"""
Derived field calculator - keeps `date_revision` one year after `date_release`.

Key behaviors:
- Reacts to every value change of the source control
- Empty or unparsable source values leave the target untouched, as do
  dates whose shifted year falls outside the calendar
- Writes to the target emit no change event and never mark it dirty
- Stops when the owning cancellation scope completes
"""

from __future__ import annotations

import logging
from typing import Any

from catalog_forms.core.calendar import add_years, format_date_for_input, parse_date
from catalog_forms.core.cancellation import CancellationScope
from catalog_forms.core.forms import FormGroup

logger = logging.getLogger(__name__)


class DerivedFieldCalculator:
    """Writes `target = source + years` whenever `source` changes."""

    def __init__(
        self,
        form: FormGroup,
        scope: CancellationScope,
        *,
        source: str = "date_release",
        target: str = "date_revision",
        years: int = 1,
    ) -> None:
        self.form = form
        self.scope = scope
        self.source = source
        self.target = target
        self.years = years

    def start(self) -> None:
        subscription = self.form[self.source].subscribe(self._on_source_change)
        self.scope.add(subscription.unsubscribe)

    def _on_source_change(self, value: Any) -> None:
        if self.scope.completed or not value:
            return

        parsed = parse_date(value)
        if parsed is None:
            return

        try:
            shifted = add_years(parsed, self.years)
        except ValueError:
            logger.debug("No %s for %s=%s", self.target, self.source, value)
            return

        derived = format_date_for_input(shifted)
        self.form[self.target].set_value(derived, emit_event=False)
        logger.debug("%s -> %s = %s", self.source, self.target, derived)
