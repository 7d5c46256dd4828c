import uvicorn

from color_translator.core.app import create_app
from color_translator.core.config import get_settings

app = create_app()


def run() -> None:
    """Entrypoint for `color-translator-api` script."""
    settings = get_settings()
    uvicorn.run(
        "color_translator.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
