from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "IRR_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Shared secret the /solve endpoint expects in the request body
    request_code: str = "resolve"

    # Root finding
    # |imag| <= tolerance * max(1, |real|) counts as a real root. 0.0 = exact test.
    root_imag_tolerance: float = Field(1e-9, ge=0)
    # Eigen-solve cost grows with the cube of the period count
    max_periods: int = Field(600, ge=2)

    # CORS
    cors_origins: list[str] = ["*"]

    # Client
    api_url: str = "http://localhost:8000"


settings = Settings()
