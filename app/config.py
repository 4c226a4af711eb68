# app/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Field bounds
TICKET_TITLE_MAX_LENGTH = int(os.getenv("TICKET_TITLE_MAX_LENGTH", 100))
TICKET_DESCRIPTION_MAX_LENGTH = int(os.getenv("TICKET_DESCRIPTION_MAX_LENGTH", 1000))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS (comma-separated, "*" allows everything)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Server
APP_HOST = os.getenv("APP_HOST", "127.0.0.1")
APP_PORT = int(os.getenv("APP_PORT", 3000))
APP_DEBUG = os.getenv("APP_DEBUG", "False").lower() == "true"
