"""Configuration utilities.

Central place to load environment driven settings (currency prefix, catalog file, output paths).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


@dataclass(slots=True)
class Settings:
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "₹")
    catalog_file: Path | None = Path(os.environ["CATALOG_FILE"]) if os.getenv("CATALOG_FILE") else None
    output_html: Path = Path(os.getenv("OUTPUT_HTML", "packages.html"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def catalog_configured(self) -> bool:
        return self.catalog_file is not None


settings = Settings()
