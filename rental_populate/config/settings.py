from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file() -> str:
    env_file = ".env" if Path("/.dockerenv").exists() else ".env.local"

    current_path = Path.cwd()

    for path in [current_path] + list(current_path.parents):
        env_path = path / env_file
        if env_path.exists():
            return str(env_path)

    return env_file


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Document store backend: "memory" for dry runs, "cosmos" for Azure
    store_backend: Literal["memory", "cosmos"] = "memory"

    # Azure Cosmos DB account
    cosmos_endpoint: Optional[str] = None
    cosmos_key: Optional[str] = None

    # Database and containers
    database_id: str = "RentalDB"
    cars_container: str = "Cars"
    rentals_container: str = "Rentals"
    users_container: str = "Users"
    partition_key_path: str = "/partitionKey"

    # Demo flow
    demo_query_brand: str = "BMW"
    demo_car_id: str = "0000BBB"
    demo_car_brand: str = "BMW"
    demo_user_name: str = "Manuel"
    demo_user_surname: str = "Gomez"
    demo_contracted_days: int = 10

    # Logging
    log_level: str = "INFO"
