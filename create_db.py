# create_db.py
import asyncio

from shared.db import init_models, dispose_engine

async def main():
    print("🔧 Creating tables...")
    await init_models()
    await dispose_engine()
    print("✅ Tables created.")

if __name__ == "__main__":
    asyncio.run(main())
