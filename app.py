"""Flask web app for StoryCraft."""

# Load environment variables from .env file before other imports
from dotenv import load_dotenv  # type: ignore[import-untyped]

load_dotenv()  # noqa: E402

import logging  # noqa: E402
from typing import Any, Dict, Optional  # noqa: E402
from flask import Flask  # noqa: E402
from flask_cors import CORS  # type: ignore[import-untyped]  # noqa: E402
from flask_limiter import Limiter  # type: ignore[import-untyped]  # noqa: E402
from flask_limiter.util import get_remote_address  # type: ignore[import-untyped]  # noqa: E402
from src.storycraft.config import get_settings  # noqa: E402
from src.storycraft.utils.errors import register_error_handlers  # noqa: E402
from src.storycraft.api.routes import register_routes  # noqa: E402

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Overrides applied on top of the environment settings

    Returns:
        Configured Flask app
    """
    flask_app = Flask(__name__)
    flask_app.config.update(
        MAX_STORY_WORDS=settings.max_story_words,
        SHARE_BASE_URL=settings.share_base_url,
        PUBLISH_RATE_LIMIT=settings.publish_rate_limit,
        RATELIMIT_STORAGE_URI=settings.rate_limit_storage_uri,
    )
    if config:
        flask_app.config.update(config)

    CORS(flask_app)

    # Configure rate limiting
    limiter = Limiter(
        get_remote_address,
        app=flask_app,
        default_limits=["200 per day", "50 per hour"],
        storage_uri=flask_app.config["RATELIMIT_STORAGE_URI"],  # Use Redis in production if available
        headers_enabled=True
    )

    register_error_handlers(flask_app, debug=settings.debug)
    register_routes(flask_app, limiter)

    logger.info(
        f"StoryCraft API ready (max story words: {flask_app.config['MAX_STORY_WORDS']}, "
        f"share links: {flask_app.config['SHARE_BASE_URL']})"
    )
    return flask_app


app = create_app()


if __name__ == '__main__':
    app.run(debug=settings.debug, port=5000)
