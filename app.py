# app.py: Flask backend
import logging
import os

from flask import Flask, jsonify, request
from pydantic import ValidationError

from llm_wrapper import OpenAIGenerator, get_agent_responses, openai_api_key
from pydantic_models import AgentRequest

logger = logging.getLogger(__name__)


def create_app(generator=None):
    """Build the API. Pass a generator to bypass OpenAI (tests, local mocks)."""
    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def index():
        return "Remedy Roots agents: POST /api/agents with the intake JSON"

    @app.route("/api/agents", methods=["POST"])
    def agents():
        if generator is None and not openai_api_key():
            return jsonify({"error": "OPENAI_API_KEY is not configured. Please add it to your environment."}), 500

        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Invalid request payload", "issues": [{"msg": "Body must be a JSON object"}]}), 400
        try:
            intake = AgentRequest.model_validate(data)
        except ValidationError as e:
            issues = e.errors(include_url=False, include_context=False, include_input=False)
            return jsonify({"error": "Invalid request payload", "issues": issues}), 400

        try:
            result = get_agent_responses(intake, generator or OpenAIGenerator())
        except Exception:
            logger.exception("Agent orchestration failed")
            return jsonify({"error": "Failed to run multi-agent ecosystem"}), 500
        return jsonify(result.model_dump(mode="json"))

    return app


logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
