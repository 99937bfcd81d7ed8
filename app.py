"""Recipe Suggester - HTTP service entry point.

Builds the FastAPI application:
- Configures the Gemini provider chain (or rule engine only without an API key)
- Selects recipe storage from DATABASE_URL (in-memory when unset)
- Serves the REST API with uvicorn

Run with: python app.py
"""

import uvicorn

from recipe_suggester.api.app import create_app
from recipe_suggester.utils.config import config
from recipe_suggester.utils.logger import logger

app = create_app()


if __name__ == "__main__":
    logger.info(f"Starting Recipe Suggester on port {config.PORT}")
    logger.info(f"LLM providers: {'enabled' if config.llm_enabled else 'disabled (rule engine only)'}")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
