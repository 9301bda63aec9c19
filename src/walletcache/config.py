from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    solana_rpc_url: str = ""
    birdeye_proxy_url: str = "http://localhost:3000"
    price_api_url: str = "https://lite-api.jup.ag/price/v3"
    curated_assets_path: str = ""
    database_url: str = "sqlite+aiosqlite:///./walletcache.db"
    redis_url: str = "redis://localhost:6379/0"
    http_timeout: float = 30.0
    http_rate_per_second: float = 0.0  # 0 = unthrottled
    debug: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
