from pydantic_settings import BaseSettings
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    # Built-in templates
    ASSETS_ROOT: Path = Field(
        default=Path(__file__).resolve().parent / "assets",
        description="Root of <locale>/new.<ext> blank templates",
    )
    DEFAULT_LOCALE: str = Field("en", description="Locale used when the request carries none")

    # Local storage backend
    DATA_ROOT: Path = Field(default=Path("./data"))
    INSTANCE_ID: str = Field("default", description="Selects the appdata_<id> root folder")
    APP_NAME: str = Field("onlyoffice", description="App folder under appdata, also the log category")

    # Misc
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
settings.DATA_ROOT.mkdir(parents=True, exist_ok=True)
