"""Run the service: ``python -m xbs_pudo``."""

import logging

import uvicorn

from xbs_pudo.app import create_app
from xbs_pudo.config import PudoConfig

logger = logging.getLogger("xbs_pudo")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = PudoConfig()
    if not config.api_key:
        logger.warning("XBS_API_KEY is not set; aggregator calls will fail")
    logger.info(
        "XBS PUDO server listening on http://%s:%d", config.host, config.port
    )
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
