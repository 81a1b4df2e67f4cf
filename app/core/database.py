from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings


def build_engine(url: str = settings.DATABASE_URL, echo: bool = settings.DB_ECHO):
    return create_async_engine(url, echo=echo)


engine = build_engine()
SessionLocal = sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession
)

Base = declarative_base()


async def get_db():
    async with SessionLocal() as db:
        yield db
