# reset_db.py
import asyncio

from shared.db import Base, get_engine, init_models, dispose_engine

async def reset_db():
    # init_models registers every table on Base.metadata, so drop after it
    await init_models()
    async with get_engine().begin() as conn:
        print("🗑️  Dropping tables...")
        await conn.run_sync(Base.metadata.drop_all)
        print("🔧 Creating tables...")
        await conn.run_sync(Base.metadata.create_all)
    await dispose_engine()
    print("✅ Database reset.")

if __name__ == "__main__":
    asyncio.run(reset_db())
