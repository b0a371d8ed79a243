"""Client configuration: service ports, backend URL and the admin secret."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from package directory
package_dir = Path(__file__).parent
env_file = package_dir / ".env"
if env_file.exists():
    load_dotenv(env_file)

SERVICE_PORTS = {
    "complaint": 8080,
}

API_BASE_URL = os.getenv("COMPLAINTHUB_API_URL", "http://localhost:8080/api/complaints")
REQUEST_TIMEOUT = float(os.getenv("COMPLAINTHUB_TIMEOUT", "5"))
ADMIN_PASSWORD = os.getenv("COMPLAINTHUB_ADMIN_PASSWORD", "your-secret-password")
LOG_DIR = os.getenv("COMPLAINTHUB_LOG_DIR", "logs")


def get_service_url(service_name: str) -> str:
    """Get the full URL for a service."""
    port = SERVICE_PORTS.get(service_name)
    if not port:
        raise ValueError(f"Unknown service: {service_name}")
    return f"http://localhost:{port}"
