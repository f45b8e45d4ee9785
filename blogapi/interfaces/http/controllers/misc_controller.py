# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from blogapi.infrastructure.observability import render_metrics
from blogapi.interfaces.http.dto.auth import WelcomeDTO


class MiscController:
    def __init__(self, *, metrics_enabled: bool = False) -> None:
        self._metrics_enabled = metrics_enabled

    def home(self) -> tuple[Response, int]:
        return jsonify(WelcomeDTO().model_dump()), 200

    def metrics(self) -> Response:
        payload, content_type = render_metrics()
        return Response(payload, status=200, content_type=content_type)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.home, methods=["GET"])
        if self._metrics_enabled:
            bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp
