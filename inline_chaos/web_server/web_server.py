"""Inline Chaos Web Server - serves the "what not to do" demonstration pages.

Endpoints:
- GET /            Home page
- GET /ping        Health check
- GET /inline-css  The inline CSS page, rendered with Jinja2
- GET /api/inline-css  The same page model as JSON
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from inline_chaos.config import Config
from inline_chaos.logger import Logger, session_logger
from inline_chaos.models import MAX_ITEMS, InlineCssModel, build_inline_css_model
from inline_chaos.styles import StyleGenerator

TEMPLATES_DIR = Path(__file__).parent / "templates"
SERVICE_NAME = "inline-chaos"


class InlineChaosWebServer:
    """FastAPI web server for the inline CSS demonstration."""

    def __init__(
        self,
        config: Optional[Config] = None,
        generator: Optional[StyleGenerator] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the web server.

        Args:
            config: Application settings (default: read from environment)
            generator: Style generator used for every page (default: shared)
            logger: Logger instance (default: session_logger)
        """
        self.config = config or Config.from_env()
        self.generator = generator or StyleGenerator()
        self.logger: Logger = logger or session_logger

        self.app = FastAPI(
            title=SERVICE_NAME,
            description="Inline styling as it should never be done",
            debug=self.config.is_development,
        )
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
            auto_reload=self.config.is_development,
        )

        self.logger.info(
            "Inline chaos web server initialized",
            environment=self.config.environment,
            templates_dir=str(TEMPLATES_DIR),
        )
        self._setup_routes()

    def _build_model(self, items: int, chaos: bool) -> InlineCssModel:
        try:
            return build_inline_css_model(self.generator, item_count=items, enable_chaos=chaos)
        except ValueError as e:
            self.logger.warning("Invalid inline CSS request", items=items, error=str(e))
            raise HTTPException(status_code=400, detail=str(e))

    def render(self, template_name: str, **context) -> str:
        template = self.jinja_env.get_template(template_name)
        return template.render(**context)

    def _setup_routes(self):
        """Set up all routes."""

        @self.app.get("/", response_class=HTMLResponse)
        async def home():
            """Home page."""
            self.logger.debug("Home page request")
            return HTMLResponse(
                self.render(
                    "index.html",
                    title="Inline Chaos",
                    environment=self.config.environment,
                )
            )

        @self.app.get("/ping")
        async def ping():
            """Health check endpoint."""
            current_time = datetime.now().isoformat()
            self.logger.debug("Ping request received", timestamp=current_time)
            return JSONResponse(
                content={
                    "status": "ok",
                    "timestamp": current_time,
                    "service": SERVICE_NAME,
                    "environment": self.config.environment,
                }
            )

        @self.app.get("/inline-css", response_class=HTMLResponse)
        async def inline_css_page(
            items: int = Query(5, description=f"Number of items (0-{MAX_ITEMS})"),
            chaos: bool = Query(True, description="Apply chaos styles to items"),
        ):
            """The inline CSS page."""
            model = self._build_model(items, chaos)
            self.logger.info("Inline CSS page request", items=items, chaos=chaos)
            return HTMLResponse(self.render("inline_css.html", model=model))

        @self.app.get("/api/inline-css")
        async def inline_css_model(
            items: int = Query(5, description=f"Number of items (0-{MAX_ITEMS})"),
            chaos: bool = Query(True, description="Apply chaos styles to items"),
        ):
            """The inline CSS page model as JSON."""
            model = self._build_model(items, chaos)
            self.logger.info("Inline CSS model request", items=items, chaos=chaos)
            return JSONResponse(content=model.model_dump())


def create_app() -> FastAPI:
    """Application factory for ``uvicorn --factory``."""
    return InlineChaosWebServer().app
