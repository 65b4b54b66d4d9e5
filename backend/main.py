import logging

from shipco.app import create_app
from shipco.config import Settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
# Suppress SQL echo/logging (engine already has echo=False)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

settings = Settings()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    logger.info("ShipCo API listening on :%d", settings.port)
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.env == "development",
    )
