"""
Conformance engine configuration management
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Conformance engine settings"""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Paths
    project_root: Path = Path(__file__).parent.parent
    log_dir: Path = project_root / "logs"
    log_level: str = "INFO"

    # Randomized test generation
    valid_checksum_probability: float = 0.8
    bad_checksum: str = "BB"  # Sentinel; never the checksum of an alphabet symbol
    random_seed: Optional[int] = None

    # Auto-run
    autorun_interval_ms: int = 1000

    # Queries
    recent_packets_window: int = 10

    class Config:
        env_prefix = "DUTCHECK_"
        env_file = ".env"


settings = Settings()
