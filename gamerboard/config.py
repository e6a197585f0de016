import os

from dotenv import load_dotenv

# Load environment variables from a .env file if present so that running the
# application locally works without manually exporting variables.
load_dotenv()

DATABASE_URL = os.getenv("DB_URL")  # Add to your .env

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TOP_TEAMS_DEFAULT_LIMIT = int(os.getenv("TOP_TEAMS_DEFAULT_LIMIT", 10))
