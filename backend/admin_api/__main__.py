"""
Entry point: `python -m admin_api`

Starts uvicorn on HOST:PORT. On Vercel in production the platform serves
`admin_api.main:app` itself, so no listener is started.
"""

import logging

import uvicorn

from admin_api.config import settings

logger = logging.getLogger("admin_api")


def main() -> None:
    if not settings.should_listen:
        logging.basicConfig(level=logging.INFO)
        logger.info("Serverless production environment detected; not starting a listener")
        return

    uvicorn.run(
        "admin_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
