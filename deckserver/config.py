"""Application configuration."""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass
class Config:
    """Application configuration loaded from environment variables."""
    
    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    
    # Shuffling (unset means a non-deterministic source)
    shuffle_seed: Optional[int] = _optional_int("SHUFFLE_SEED")
    
    # CLI client
    api_url: str = os.getenv("DECK_API_URL", "http://localhost:3000")
    
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


config = Config()
