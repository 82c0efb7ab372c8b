import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # Patron display limit (shown, not enforced)
    patron_max_items: int = int(os.getenv("PATRON_MAX_ITEMS", "5"))


settings = Settings()
