from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

# --- Services & Utils ---
from utils.config import Config
from utils.gemini_client import GeminiClient
from utils.utils import setup_logger
from services.medicine_service import MedicineInfoService
from services.validator import Validator

logger = setup_logger(__name__)


def create_app(config=None, client=None):
    # --- App Config ---
    if config is None:
        config = Config.from_env()
    config.validate()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.MAX_CONTENT_LENGTH
    app.json.sort_keys = False  # keep the model's field order in `raw`
    CORS(app, origins=config.CORS_ORIGINS, send_wildcard=config.CORS_ORIGINS == "*")

    # --- Initialize Core Services ---
    medicine_service = MedicineInfoService(client or GeminiClient(config))

    # --- Error Handling ---
    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_exception(e):
        logger.error(f"Unhandled Exception: {e}", exc_info=True)
        return jsonify({'error': 'Internal Server Error'}), 500

    # --- Routes ---
    @app.route('/health')
    def health():
        return jsonify({'ok': True})

    @app.route('/api/ai', methods=['POST'])
    def ai_lookup():
        data = request.get_json(silent=True)

        valid_err = Validator.validate_query(data)
        if valid_err:
            return jsonify({'error': valid_err}), 400

        try:
            result = medicine_service.lookup(data['query'])
        except Exception as e:
            logger.error(f"Gemini Error: {e}", exc_info=True)
            return jsonify({'error': 'Gemini AI request failed'}), 500

        return jsonify(result)

    return app


if __name__ == '__main__':
    config = Config.from_env()
    app = create_app(config)
    logger.info(f"Backend running on http://localhost:{config.PORT}")
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, use_reloader=False)
