"""
data_exporter.api.__main__

Entrypoint for `python -m data_exporter.api` and the `data-exporter` script.

Settings come from `DX_*` environment variables, e.g. `DX_SEED_SAMPLE_DATA=true`
to start with the sample policies loaded.
"""

from __future__ import annotations

import uvicorn

from data_exporter.api.app import create_app
from data_exporter.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
        log_level=settings.log_level.lower(),
        # RequestContextMiddleware writes the access line.
        access_log=False,
    )


if __name__ == "__main__":
    main()
