from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment
load_dotenv()


class Settings(BaseSettings):
    database_url: Optional[str] = None
    sql_echo: bool = False
    session_ttl_minutes: int = 120  # how long a table session stays open


settings = Settings()
