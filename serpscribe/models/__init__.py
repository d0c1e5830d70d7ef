"""SQLAlchemy database models."""
from dotenv import load_dotenv
from serpscribe.models.base import Base
from serpscribe.models.serp import SerpResult

load_dotenv()

__all__ = [
    "Base",
    "SerpResult",
]
