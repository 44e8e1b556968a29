## routes.py
from __future__ import annotations

from concurrent.futures import Executor, TimeoutError as FutureTimeoutError
from typing import Optional, Union

from flask import Blueprint, current_app, jsonify, render_template, request

from xmlcompare_web.config import AppSettings
from xmlcompare_web.domain.models import ComparisonOutcome, FileInput, OutcomeStatus
from xmlcompare_web.services.comparison_service import ComparisonService

Side = Union[FileInput, str]

SIDES = ("first", "second")


def _status_code(outcome: ComparisonOutcome, timed_out: bool) -> int:
    if timed_out:
        return 504
    if outcome.status is OutcomeStatus.ERROR:
        return 422
    return 200


def outcome_to_dict(outcome: ComparisonOutcome) -> dict:
    return {
        "status": outcome.status.value,
        "message": outcome.message,
        "differences": [
            {
                "line_number": r.line_number,
                "first": r.first,
                "second": r.second,
                "note": r.note,
                "text": r.describe(),
            }
            for r in outcome.differences
        ],
    }


def create_blueprint(comparison_service: ComparisonService, executor: Executor, settings: AppSettings) -> Blueprint:
    bp = Blueprint("web", __name__)

    def read_side(which: str, payload: dict) -> Optional[Side]:
        upload = request.files.get(f"{which}_file")
        if upload is not None and (upload.filename or "").strip():
            return comparison_service.file_repo.from_upload(upload.filename, upload.read())

        path = str(payload.get(f"{which}_path") or "").strip()
        if path and settings.allow_local_paths:
            return path
        return None

    def run_comparison(first: Side, second: Side) -> tuple[ComparisonOutcome, bool]:
        # comparison runs on the pool; the request thread only waits for the single outcome
        future = executor.submit(comparison_service.compare_sources, first, second)
        try:
            return future.result(timeout=settings.timeout_seconds), False
        except FutureTimeoutError:
            current_app.logger.warning("Comparison timed out after %d s", settings.timeout_seconds)
            return ComparisonOutcome.error(
                f"Comparison timed out after {settings.timeout_seconds} seconds."
            ), True

    def side_label(side: Side) -> str:
        return side.name if isinstance(side, FileInput) else side

    def page_model(**overrides) -> dict:
        model = dict(
            outcome=ComparisonOutcome.pending(),
            allow_local_paths=settings.allow_local_paths,
            first_path="",
            second_path="",
            error=None,
        )
        model.update(overrides)
        return model

    @bp.app_errorhandler(413)
    def upload_too_large(e):
        outcome = ComparisonOutcome.error(
            f"Files are too large to compare (limit {settings.max_upload_mb} MB)."
        )
        current_app.logger.info("Compare rejected: request body over %d MB", settings.max_upload_mb)
        if request.path.startswith("/api/"):
            return jsonify(outcome_to_dict(outcome)), 413
        return render_template(
            "result.html",
            outcome=outcome,
            first_name="",
            second_name="",
            shown=(),
            remaining=0,
        ), 413

    @bp.get("/")
    def index():
        return render_template("index.html", **page_model())

    @bp.post("/compare")
    def compare():
        first, second = (read_side(w, request.form) for w in SIDES)

        if first is None or second is None:
            missing = ", ".join(w for w, s in zip(SIDES, (first, second)) if s is None)
            current_app.logger.info("Compare rejected, missing input: %s", missing)
            return render_template(
                "index.html",
                **page_model(
                    first_path=(request.form.get("first_path") or "").strip(),
                    second_path=(request.form.get("second_path") or "").strip(),
                    error=f"Select two files to compare (missing: {missing}).",
                ),
            ), 400

        outcome, timed_out = run_comparison(first, second)
        current_app.logger.info(
            "Compare %s vs %s status=%s records=%d",
            side_label(first), side_label(second), outcome.status.value, len(outcome.differences),
        )

        limit = settings.max_displayed_differences
        return render_template(
            "result.html",
            outcome=outcome,
            first_name=side_label(first),
            second_name=side_label(second),
            shown=outcome.differences[:limit],
            remaining=max(0, len(outcome.differences) - limit),
        ), _status_code(outcome, timed_out)

    @bp.post("/api/compare")
    def api_compare():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = request.form
        first, second = (read_side(w, payload) for w in SIDES)

        if first is None or second is None:
            return jsonify({"status": "error", "message": "Two files are required.", "differences": []}), 400

        outcome, timed_out = run_comparison(first, second)
        return jsonify(outcome_to_dict(outcome)), _status_code(outcome, timed_out)

    return bp
