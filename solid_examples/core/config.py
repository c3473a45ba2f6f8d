import os
from dotenv import load_dotenv

# Load .env from the project root
PROJECT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
load_dotenv(os.path.join(PROJECT_DIR, ".env"))

# Auth
SECRET_KEY: str = os.getenv("SECRET_KEY", "solid-examples-dev-secret-change-in-prod")
ALGORITHM: str = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

DEMO_USERNAME: str = os.getenv("DEMO_USERNAME", "admin")
DEMO_PASSWORD: str = os.getenv("DEMO_PASSWORD", "admin")

# Sales reporting
DEFAULT_SALES_FORMAT: str = os.getenv("DEFAULT_SALES_FORMAT", "html")

# Simulated database connection used by the password reminder
DB_DRIVER: str = os.getenv("DB_DRIVER", "mysql")
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_USERNAME: str = os.getenv("DB_USERNAME", "root")
DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
DB_NAME: str = os.getenv("DB_NAME", "app")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
