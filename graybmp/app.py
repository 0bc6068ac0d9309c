from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from .config import SETTINGS, EngineSettings, configure_logging
from .infrastructure.bitmap import Bitmap, load_bitmap
from .infrastructure.responses import send_bitmap
from .processing.histogram import occupied_bounds
from .processing.pipeline import OPERATIONS, get_operation, run_operation

APP_VERSION = "1.0.0"

log = logging.getLogger(__name__)


def _uploaded_bitmap() -> Bitmap:
    upload = request.files.get("image")
    data = upload.read() if upload is not None else request.get_data()
    if not data:
        raise ValueError("Request carries no image data")
    return load_bitmap(data)


def create_app(settings: EngineSettings = SETTINGS) -> Flask:
    configure_logging()
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes

    @app.route("/health")
    def health():
        return jsonify(ok=True, version=APP_VERSION)

    @app.route("/operations")
    def operations():
        return jsonify(
            [
                {"code": op.code, "tag": op.tag, "label": op.label, "params": list(op.params)}
                for op in OPERATIONS
            ]
        )

    @app.route("/transform/<tag>", methods=["POST"])
    def transform(tag: str):
        try:
            operation = get_operation(tag)
            if not operation.produces_image:
                raise ValueError(f"'{operation.tag}' does not produce an image; use /histogram")
            bitmap = _uploaded_bitmap()
            result = run_operation(
                operation,
                bitmap.grid,
                settings=settings,
                **{name: request.args.get(name) for name in operation.params},
            )
        except ValueError as exc:
            return (f"Bad request: {exc}", 400)

        headers = {}
        if result.threshold is not None:
            headers["X-Threshold"] = str(result.threshold)
        log.info("transformed %dx%d image with %s", bitmap.grid.width, bitmap.grid.height, operation.tag)
        return send_bitmap(bitmap, result.grid, download_name=f"{operation.tag}.bmp", headers=headers)

    @app.route("/histogram", methods=["POST"])
    def histogram():
        try:
            bitmap = _uploaded_bitmap()
            result = run_operation("histogram", bitmap.grid, settings=settings)
        except ValueError as exc:
            return (f"Bad request: {exc}", 400)
        low, high = occupied_bounds(result.histogram)
        return jsonify(histogram=result.histogram, low=low, high=high)

    return app


# Module-level application for WSGI servers, e.g. ``graybmp.app:app``.
app = create_app()
application = app
