"""Runtime settings for the crawler.

Values come from environment variables, optionally from a `.env` file in
the project root (loaded when this module is imported).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # page listing the payroll PDFs, grouped by year/month
    tjpb_url: str = field(
        default_factory=lambda: os.environ.get(
            "TJPB_URL",
            "https://www.tjpb.jus.br/transparencia/gestao-de-pessoas/folha-de-pagamento-de-pessoal",
        )
    )
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("TJPB_OUTPUT_DIR", "."))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )


settings = Settings()
