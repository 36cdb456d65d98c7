"""
api.routes_convert - /api/v1/convert and /api/v1/health endpoints.

Accepts CSV via multipart file upload or raw request body and
answers with the JSON array itself.
"""

import logging

from flask import Response, jsonify, request

import config
from api import api_bp
from converter import ConversionOptions, RowError, convert_text
from converter.columns import split_columns

logger = logging.getLogger("converter.api")


@api_bp.route("/health", methods=["GET"])
def api_health():
    return jsonify({"ok": True, "version": config.VERSION})


@api_bp.route("/convert", methods=["POST"])
def api_convert():
    """
    POST /api/v1/convert?skip_errors=0|1&columns=a,b,c&indent=N&report=0|1

    Multipart: field name 'csv_file'
    Or: raw CSV as request body (Content-Type: text/csv).

    report=1 answers with the conversion report instead of the records.
    """
    columns = request.args.get("columns", "")
    options = ConversionOptions(
        columns=split_columns([columns]) if columns else [],
        skip_errors=request.args.get("skip_errors", "0") == "1",
        indent=request.args.get("indent", type=int),
        logger=logger,
    )

    if request.content_type and "multipart" in request.content_type:
        f = request.files.get("csv_file")
        if not f:
            return jsonify({"error": "no csv_file in upload"}), 400
        content = f.read()
    else:
        content = request.get_data()

    if not content:
        return jsonify({"error": "empty body"}), 400

    try:
        body, report = convert_text(content, options)
    except RowError as exc:
        logger.info(f"Rejected upload: {exc}")
        return jsonify({"error": str(exc), "line": exc.line}), 422

    if request.args.get("report", "0") == "1":
        return jsonify(report.to_dict())

    resp = Response(body, mimetype="application/json")
    resp.headers["X-Rows-Total"] = str(report.total_rows)
    resp.headers["X-Rows-Converted"] = str(report.converted)
    resp.headers["X-Rows-Skipped"] = str(report.skipped)
    return resp
