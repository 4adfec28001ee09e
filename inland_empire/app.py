import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from inland_empire.llm import LLM
from inland_empire.routes import router
from inland_empire.storage import Storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def create_app(data_dir: Path | None = None, llm: LLM | None = None) -> FastAPI:
    """Build the API app.

    State lives on app.state: the Storage, the live Psyche and Settings loaded
    from it, an optional LLM override (tests, offline runs) and the lock that
    serialises passes and state changes.
    """
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage = Storage(resolved)

    app = FastAPI(title="Inland Empire")
    app.state.storage = storage
    app.state.settings = storage.load_settings()
    app.state.psyche = storage.load_psyche()
    app.state.llm = llm
    app.state.lock = asyncio.Lock()

    app.include_router(router, prefix="/api")
    return app
