from pathlib import Path

import os

# Retrieve enviroment variables

SERVICE_NAME = os.environ.get("EVOTING_SERVICE_NAME", "e-voting-service")
SERVICE_VERSION = os.environ.get("EVOTING_SERVICE_VERSION", "0.1.0")

HOST = os.environ.get("EVOTING_HOST", "127.0.0.1")
PORT = int(os.environ.get("EVOTING_PORT", 8000))

LOGGER_CONFIG = os.environ.get("EVOTING_LOGGER_CONFIG", str(Path(__file__).with_name("logger_config.json")))

CAPABILITIES_PAGE_SIZE = int(os.environ.get("EVOTING_CAPABILITIES_PAGE_SIZE", 50))

# largest bound accepted for a tally decryption
MAX_TALLY_BOUND = int(os.environ.get("EVOTING_MAX_TALLY_BOUND", 10_000_000))

ORIGINS: list = os.environ.get("ORIGINS", "*").split(",")
