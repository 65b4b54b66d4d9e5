from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./data/shipco.db"

    jwt_secret: str = "dev_secret_change_me"
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7

    # bcrypt work factor for the admin password hash
    bcrypt_rounds: int = 10

    port: int = 5050
    env: str = "development"
    frontend_url: str = "http://localhost:3000"
    cors_allow_all: bool = True

    seed_demo_data: bool = True

    model_config = {"env_file": ".env", "extra": "ignore", "env_file_encoding": "utf-8"}

    def cors_origins(self) -> list[str]:
        if self.cors_allow_all:
            return ["*"]
        return [self.frontend_url, "http://localhost:3000"]
