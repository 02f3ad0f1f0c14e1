from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template

from ..common.web import login_required
from ..container import Container
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            stats = container.dashboard_service.get_stats()
        except StoreError as e:
            # explicit error state instead of an endless loading panel
            return render_template("dashboard.html", stats=None, error=str(e), active_page="dashboard")
        return render_template("dashboard.html", stats=stats, error=None, active_page="dashboard")

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @login_required
    def api_dashboard():
        try:
            stats = container.dashboard_service.get_stats()
        except StoreError as e:
            logger.warning("Dashboard stats unavailable: %s", e)
            return jsonify({"error": str(e)}), 503
        return jsonify(stats.to_dict())
