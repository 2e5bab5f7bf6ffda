from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    polygon_api_key: str = ""
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origin: str = "http://localhost:3000"
    request_timeout: float = 25.0
    log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}
