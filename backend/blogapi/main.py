"""
ASGI entry point.

    uvicorn blogapi.main:app
"""

from blogapi.api import create_app
from blogapi.config import get_settings

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blogapi.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
