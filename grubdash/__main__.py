import uvicorn

from grubdash.core.config import get_settings

settings = get_settings()

uvicorn.run("grubdash.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
