"""Run the API server: ``python -m pubgate``."""

import uvicorn

from pubgate.config import Config


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    uvicorn.run(
        "pubgate.application.api.rest.app:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        log_config=None,  # configure_logging owns the root logger
    )


if __name__ == "__main__":
    main()
