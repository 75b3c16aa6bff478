from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="CRUDGEN_", extra="ignore")

    app_name: str = "crudgen"
    log_level: str = "INFO"

    project_root: str = "."
    server_dir: str = "backend"
    client_dir: str = "frontend/src/app/core"
    api_prefix: str = "/api"

    default_fields: str = "name:string,description:string"

settings = Settings()
