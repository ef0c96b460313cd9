import os
from dotenv import load_dotenv

from utils.utils import setup_logger

logger = setup_logger(__name__)

DEFAULT_MODEL_NAME = "gemini-1.5-flash"
DEFAULT_PORT = 3000


class Config:
    """Process-wide settings, built once at startup and handed to the app."""

    MAX_CONTENT_LENGTH = 1024 * 1024  # 1 MB request bodies

    def __init__(self, google_api_key=None, gemini_model_name=DEFAULT_MODEL_NAME,
                 port=DEFAULT_PORT, host="0.0.0.0", debug=False, cors_origins="*"):
        self.GOOGLE_API_KEY = google_api_key
        self.GEMINI_MODEL_NAME = gemini_model_name
        self.PORT = port
        self.HOST = host
        self.DEBUG = debug
        self.CORS_ORIGINS = cors_origins

    @classmethod
    def from_env(cls, load_env_file=True):
        if load_env_file:
            load_dotenv()
        return cls(
            google_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY"),
            gemini_model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME),
            port=int(os.getenv("PORT", DEFAULT_PORT)),
            host=os.getenv("HOST", "0.0.0.0"),
            debug=os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes"),
            cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
        )

    def validate(self):
        """Warn about missing credentials. The key itself is only checked by the first Gemini call."""
        if not self.GOOGLE_API_KEY:
            logger.warning("GEMINI_API_KEY is missing. Requests to /api/ai will fail until it is set.")
            return False
        return True


def _parse_origins(raw):
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins or origins == ["*"]:
        return "*"
    return origins
