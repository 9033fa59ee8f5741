from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./ai_chatbot.db"
    SECRET_KEY: str = "fallback-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ENV: str = "local"  # Environment setting

    HOST: str = "localhost"
    PORT: int = 5001
    LOG_LEVEL: str = "INFO"

    # Only this origin may call the API from a browser
    CORS_ORIGIN: str = "https://smart-retrieval-app.vercel.app"

    class Config:
        env_file = ".env"

settings = Settings()
