from __future__ import annotations

import io
from typing import Optional, Sequence

import pandas as pd

from ..common.datetime_utils import format_hhmm
from ..records.model import Record
from .aggregator import Totals, aggregate

COLUMNS = [
    "Date",
    "Check-in",
    "Check-out",
    "Break (min)",
    "Day type",
    "Regular hours",
    "OT tier 1",
    "OT tier 2",
    "OT total",
    "Applied rate",
    "Salary",
    "Note",
]


class ReportExporter:
    """Render records as a table. Numbers are copied from the records, never recomputed."""

    def _rows(self, records: Sequence[Record]) -> list[list]:
        rows = []
        for r in records:
            shown = r.breakdown.to_display()
            rows.append(
                [
                    r.entry.date.isoformat(),
                    format_hhmm(r.entry.check_in),
                    format_hhmm(r.entry.check_out),
                    r.entry.break_minutes,
                    r.entry.day_type.value,
                    shown["regular_hours"],
                    shown["overtime_tier1_hours"],
                    shown["overtime_tier2_hours"],
                    shown["overtime_total_hours"],
                    str(r.applied_rate),
                    r.salary,
                    r.entry.note,
                ]
            )
        return rows

    def to_frame(self, records: Sequence[Record]) -> pd.DataFrame:
        return pd.DataFrame(self._rows(records), columns=COLUMNS)

    def _totals_row(self, totals: Totals) -> list:
        shown = totals.to_display()
        return [
            "Total",
            "",
            "",
            "",
            f"{totals.count} records",
            shown["regular_hours"],
            shown["overtime_tier1_hours"],
            shown["overtime_tier2_hours"],
            shown["overtime_total_hours"],
            "",
            totals.salary,
            "",
        ]

    def to_tsv(self, records: Sequence[Record], totals: Optional[Totals] = None) -> str:
        """Tab-separated text with a trailing totals row, ready to paste into a spreadsheet."""
        totals = totals if totals is not None else aggregate(records)
        df = pd.DataFrame(self._rows(records) + [self._totals_row(totals)], columns=COLUMNS)
        return df.to_csv(sep="\t", index=False, lineterminator="\n")

    def to_excel(self, records: Sequence[Record], totals: Optional[Totals] = None) -> bytes:
        totals = totals if totals is not None else aggregate(records)
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            self.to_frame(records).to_excel(writer, index=False, sheet_name="Records")
            pd.DataFrame([self._totals_row(totals)], columns=COLUMNS).to_excel(
                writer, index=False, sheet_name="Summary"
            )
        return output.getvalue()
