from fastapi import FastAPI

from evoting.config import LOGGER_CONFIG, SERVICE_NAME, SERVICE_VERSION
from evoting.logger import CustomizeLogger
from evoting.middleware import register_middlewares
from evoting.service.routes import api_router

app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)

app.logger = CustomizeLogger.make_logger(LOGGER_CONFIG)

register_middlewares(app)

# Routes
app.include_router(api_router)
