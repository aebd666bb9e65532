"""Single-port server for the riskgauge API."""
import logging
import os

import uvicorn

from riskgauge.api.app import create_app

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("RISKGAUGE_DEBUG") == "1" else logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = create_app(use_lifespan=True)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))
