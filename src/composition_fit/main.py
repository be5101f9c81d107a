"""Process entrypoints.

`composition-fit` runs the app directly; for other ASGI servers point them
at the factory, e.g. `uvicorn --factory composition_fit.main:build_app`.
"""

import uvicorn
from fastapi import FastAPI

from composition_fit.api.app import create_app
from composition_fit.containers import AppContainer, build_container


def build_app(container: AppContainer | None = None) -> FastAPI:
    """Create the app with the default container unless one is given."""
    return create_app(container or build_container())


def main() -> None:
    """Run the web app on the configured host and port."""
    container = build_container()
    print(
        "Composition Fit serving on "
        f"http://{container.settings.host}:{container.settings.port}"
    )
    uvicorn.run(
        build_app(container),
        host=container.settings.host,
        port=container.settings.port,
    )


if __name__ == "__main__":
    main()
