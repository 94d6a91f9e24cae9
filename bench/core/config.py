from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    # dump() exits the process afterwards unless told otherwise
    dump_kill: bool = True
    dump_indent: int = 2

    model_config = {"env_prefix": "BENCH_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
