"""
Serve the contact API with uvicorn.
Run: python -m api (from repo root, with .env or env vars set).
"""
import os

import uvicorn

from api.main import app, logger


def main() -> None:
    host = os.environ.get("HOST", "0.0.0.0").strip()
    port = int(os.environ.get("PORT", "8080"))
    logger.info("Server is running on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
