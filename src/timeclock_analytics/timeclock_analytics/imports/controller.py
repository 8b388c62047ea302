from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..core.exceptions import NoValidPunchesError, UnsupportedFileTypeError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/imports", methods=["POST"], endpoint="import_file")
    def import_file():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"error": "No file uploaded (expected multipart field 'file')"}), 400

        try:
            outcome = container.import_service.import_file(upload.filename, upload.read())
        except (UnsupportedFileTypeError, NoValidPunchesError) as e:
            return jsonify({"error": str(e)}), 400

        return jsonify(asdict(outcome)), 201

    @app.route("/api/punches", methods=["DELETE"], endpoint="clear_punches")
    def clear_punches():
        removed = container.import_service.clear_all()
        return jsonify({"removed": removed}), 200
