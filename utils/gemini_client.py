import google.generativeai as genai
from utils.utils import setup_logger

logger = setup_logger(__name__)


class UpstreamError(Exception):
    """The Gemini call failed (network, auth, quota, blocked response...)."""


class GeminiClient:
    def __init__(self, config):
        self.model_name = config.GEMINI_MODEL_NAME
        self.model = None
        if not config.GOOGLE_API_KEY:
            logger.warning("Google API Key not found")
        else:
            genai.configure(api_key=config.GOOGLE_API_KEY)
            self.model = genai.GenerativeModel(self.model_name)

    def generate_content(self, prompt):
        """Send one prompt, return the completion text. Raises UpstreamError on any failure."""
        if self.model is None:
            raise UpstreamError("Gemini client is not configured: missing API key")
        try:
            response = self.model.generate_content(prompt)
            return response.text or ""
        except Exception as e:
            raise UpstreamError(f"{self.model_name} request failed: {e}") from e
