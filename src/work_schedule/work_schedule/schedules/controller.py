from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, render_template, request

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.calendar_service

    @app.route("/work-schedule", methods=["GET"], endpoint="work_schedule")
    def work_schedule():
        month = request.args.get("month") or ""
        try:
            view = service.month_view(month)
        except ValidationError as e:
            flash(str(e), "danger")
            view = service.month_view(None)

        return render_template(
            "work_schedule/calendar.html",
            view=view,
            active_page="work_schedule",
        )

    @app.route("/api/work-schedule/calendar", methods=["GET"], endpoint="api_work_schedule_calendar")
    def api_calendar():
        try:
            view = service.month_view(request.args.get("month"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to build month view")
            return jsonify({"error": "Internal error while building calendar"}), 500

        return jsonify(view.to_dict())

    @app.route("/api/work-schedule/grid", methods=["GET"], endpoint="api_work_schedule_grid")
    def api_grid():
        month = service.resolve_month(request.args.get("month"))
        try:
            grid = service.grid(month)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to build grid for %s", month)
            return jsonify({"error": "Internal error while building calendar"}), 500

        return jsonify({"month": month, "cells": [c.to_dict() for c in grid]})
