"""Storage gateway entry point."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .config.logging_config import LoggingConfig
from .config.settings import get_settings

# Load .env first, then .env.local overrides, from the working directory
for env_file, override in ((Path(".env"), False), (Path(".env.local"), True)):
    if env_file.exists():
        load_dotenv(env_file, override=override)

# Configure logging based on settings
LoggingConfig.configure()

from .app import create_app

logger = LoggingConfig.get_logger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()

    logger.info(f"Starting storage gateway on {settings.host}:{settings.port}")

    uvicorn.run(
        "storage_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
