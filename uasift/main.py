# uasift/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from uasift.config import settings
from uasift.extensions import EXTENSIONS, get_extensions
from uasift.merger import extend_rules
from uasift.regexes import DEFAULT_RULES
from uasift.safety import audit_rules
from uasift.api import router as api_router
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    # Startup
    logger.info("Starting uasift API...")

    # Effective rule table shared by every request
    app.state.defaults = DEFAULT_RULES
    app.state.rules = extend_rules(
        DEFAULT_RULES,
        get_extensions(settings.extensions),
        prepend=settings.prepend_extensions,
    )
    if settings.extensions:
        logger.info(f"Extensions enabled: {', '.join(settings.extensions)}")

    # Patterns are checked offline too; a failure here is logged, not fatal
    audit_rules([DEFAULT_RULES, *EXTENSIONS.values()])

    logger.info("uasift API ready")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="uasift",
    description="Classifies user-agent strings into browser, engine, OS, device and CPU",
    version="1.0.0",
    lifespan=lifespan,
)

# Register routes
app.include_router(api_router)
