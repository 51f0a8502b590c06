"""Litestar application factory."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.contrib.jinja import JinjaTemplateEngine
from litestar.template import TemplateConfig

from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import EXCEPTION_HANDLERS
from xbs_pudo.plugin import create_pudo_router

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_app(
    config: PudoConfig | None = None, **router_kwargs: Any
) -> Litestar:
    """Build the application.

    Extra keyword arguments are passed to :func:`create_pudo_router`.
    """
    config = config or PudoConfig()
    return Litestar(
        route_handlers=[create_pudo_router(config=config, **router_kwargs)],
        cors_config=CORSConfig(allow_origins=["*"]),
        template_config=TemplateConfig(
            directory=TEMPLATES_DIR,
            engine=JinjaTemplateEngine,
        ),
        exception_handlers=EXCEPTION_HANDLERS,
    )
