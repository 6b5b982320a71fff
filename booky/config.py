import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # where the book list lives
    app_id: str = os.getenv("BOOKY_APP_ID", "booky")
    config_dir: Optional[str] = os.getenv("BOOKY_CONFIG_DIR")
    books_file: str = "books.json"

    # logging goes to a file, the terminal belongs to the UI
    log_level: str = os.getenv("BOOKY_LOG_LEVEL", "INFO").upper()
    log_file: Optional[str] = os.getenv("BOOKY_LOG_FILE")


settings = Settings()
