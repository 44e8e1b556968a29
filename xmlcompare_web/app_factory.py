from __future__ import annotations

import atexit
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from flask import Flask

from xmlcompare_web.config.ini_config import AppSettings, IniConfig
from xmlcompare_web.repositories.file_repository import FileRepository
from xmlcompare_web.services.comparison_service import ComparisonService
from xmlcompare_web.services.line_differ import PositionalLineDiffer
from xmlcompare_web.services.xml_normalization import InterTagWhitespaceNormalizer
from xmlcompare_web.web.routes import create_blueprint


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    comparison_service = ComparisonService(
        file_repo=FileRepository(),
        normalizer=InterTagWhitespaceNormalizer(),
        line_differ=PositionalLineDiffer(),
        xml_extensions=settings.xml_extensions,
        encoding=settings.encoding,
    )

    executor = ThreadPoolExecutor(max_workers=settings.workers, thread_name_prefix="compare")
    atexit.register(executor.shutdown, wait=False)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(comparison_service, executor, settings))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_mb * 1024 * 1024
    app.extensions["comparison_service"] = comparison_service
    app.extensions["comparison_executor"] = executor

    return app
