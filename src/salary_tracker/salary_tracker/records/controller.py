from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, Response, jsonify, request

from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..payroll.aggregator import DateRange


def period_from_args(args, *, container: Container) -> Optional[DateRange]:
    """``month=YYYY-MM`` | ``settlement=YYYY-MM`` | ``start=&end=`` | nothing (all records)."""
    month = (args.get("month") or "").strip()
    settlement = (args.get("settlement") or "").strip()
    start = (args.get("start") or "").strip()
    end = (args.get("end") or "").strip()

    if month and month != "all":
        year, mon = _parse_month(month, "month")
        return DateRange.for_month(year, mon)
    if settlement:
        year, mon = _parse_month(settlement, "settlement")
        return container.record_service.settlement_period(year, mon)
    if start or end:
        return DateRange(
            start=require_iso_date(start, "start") if start else date.min,
            end=require_iso_date(end, "end") if end else date.max,
        )
    return None


def _parse_month(value: str, field_name: str) -> tuple[int, int]:
    try:
        year, mon = (int(p) for p in value.split("-"))
        date(year, mon, 1)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM")
    return year, mon


def _record_json(record) -> dict:
    return {**record.to_dict(), **record.breakdown.to_display()}


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    @app.route("/api/records", methods=["GET"], endpoint="list_records")
    def list_records():
        period = period_from_args(request.args, container=container)
        return jsonify({"success": True, "records": [_record_json(r) for r in service.list_records(period)]})

    @app.route("/api/records", methods=["POST"], endpoint="add_record")
    def add_record():
        record = service.add_record_from_form(request.get_json(silent=True) or {})
        return (
            jsonify(
                {
                    "success": True,
                    "message": f"Added: {record.date.isoformat()}",
                    "record": _record_json(record),
                    "next_date": service.next_entry_date(record.date).isoformat(),
                }
            ),
            201,
        )

    @app.route("/api/records/<int:record_id>", methods=["DELETE"], endpoint="delete_record")
    def delete_record(record_id: int):
        service.delete_record(record_id)
        return jsonify({"success": True})

    @app.route("/api/records/delete", methods=["POST"], endpoint="delete_records")
    def delete_records():
        data = request.get_json(silent=True) or {}
        if data.get("ids") is not None:
            if not isinstance(data["ids"], list):
                raise ValidationError("ids must be a list of record ids")
            try:
                removed = service.delete_records(data["ids"])
            except (TypeError, ValueError):
                raise ValidationError("ids must be a list of record ids")
        else:
            period = period_from_args(data, container=container)
            if period is None:
                raise ValidationError("Select records or a date range to delete")
            removed = service.delete_period(period)
        return jsonify({"success": True, "removed": removed})

    @app.route("/api/summary", methods=["GET"], endpoint="summary")
    def summary():
        period = period_from_args(request.args, container=container)
        return jsonify({"success": True, "totals": service.summarize(period).to_display()})

    @app.route("/api/months", methods=["GET"], endpoint="months")
    def months():
        return jsonify({"success": True, "months": service.month_options()})

    @app.route("/api/export.tsv", methods=["GET"], endpoint="export_tsv")
    def export_tsv():
        period = period_from_args(request.args, container=container)
        text = container.exporter.to_tsv(service.list_records(period), service.summarize(period))
        return Response(text, mimetype="text/tab-separated-values")

    @app.route("/api/export.xlsx", methods=["GET"], endpoint="export_xlsx")
    def export_xlsx():
        period = period_from_args(request.args, container=container)
        content = container.exporter.to_excel(service.list_records(period), service.summarize(period))
        return Response(
            content,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": "attachment; filename=salary_records.xlsx"},
        )
