from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from app.config.settings import get_settings


def main() -> None:
    load_dotenv()
    settings = get_settings()
    print(f"[SERVER][start] host={settings.HOST} port={settings.PORT}", flush=True)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level="info")


if __name__ == "__main__":
    main()
