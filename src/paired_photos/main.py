"""Run the API with uvicorn."""

import uvicorn

from paired_photos.api.app import create_app
from paired_photos.containers import build_container


def main() -> None:
    """Build the container and serve the app on the configured port."""
    container = build_container()
    uvicorn.run(
        create_app(container),
        host=container.settings.host,
        port=container.settings.port,
    )


if __name__ == "__main__":
    main()
