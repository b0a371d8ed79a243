"""Complaint Service Configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from service directory
service_dir = Path(__file__).parent
env_file = service_dir / ".env"
if env_file.exists():
    load_dotenv(env_file)

# Service Configuration
PORT = int(os.getenv("PORT", "8080"))
SERVICE_NAME = os.getenv("SERVICE_NAME", "complaint")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Prefix of server-issued complaint IDs
ID_PREFIX = os.getenv("ID_PREFIX", "COMP-")
