"""
Parse a template and generate the app skeleton in one call.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_APP, AppConfig
from .scaffold import ScaffoldOptions, ScaffoldReport, generate_app
from .template import parse_template

logger = logging.getLogger(__name__)


def generate_from_template(
    markup: str,
    app: AppConfig = DEFAULT_APP,
    options: Optional[ScaffoldOptions] = None,
) -> ScaffoldReport:
    """
    Parse `markup` and write the skeleton for `app`.

    Template errors are raised before anything touches the filesystem.
    """
    pages = parse_template(markup)
    logger.info("Template declares %d page(s)", len(pages))
    return generate_app(app, pages, options)
