from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.settings_service

    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    def get_settings():
        return jsonify({"success": True, "settings": service.get_rates().to_dict()})

    @app.route("/api/settings", methods=["PUT"], endpoint="update_settings")
    def update_settings():
        rates = service.update_rates(**(request.get_json(silent=True) or {}))
        return jsonify({"success": True, "settings": rates.to_dict()})
