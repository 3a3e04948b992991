# reset_admin.py
"""
Create the admin account, or reset its password if it already exists.

    python reset_admin.py [email] [password] [name]

Missing arguments fall back to ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_NAME.
"""
import asyncio
import os
import sys

from dotenv import load_dotenv
from sqlalchemy.future import select

from services.user_management.models.users import User, UserRole, UserStatus
from shared.auth import get_password_hash
from shared.db import get_session_factory, init_models, dispose_engine

load_dotenv()

async def reset_admin(email: str, password: str, name: str):
    await init_models()
    async with get_session_factory()() as db:
        result = await db.execute(select(User).where(User.email == email))
        admin = result.scalars().first()
        if admin:
            admin.hashed_password = get_password_hash(password)
            admin.role = UserRole.ADMIN
            admin.status = UserStatus.ACTIVE
            print(f"🔑 Password reset for {email}")
        else:
            db.add(User(
                name=name,
                email=email,
                hashed_password=get_password_hash(password),
                role=UserRole.ADMIN,
                status=UserStatus.ACTIVE,
            ))
            print(f"✅ Admin {email} created")
        await db.commit()
    await dispose_engine()

if __name__ == "__main__":
    args = sys.argv[1:]
    email = (args[0] if len(args) > 0 else os.getenv("ADMIN_EMAIL", "")).strip().lower()
    password = args[1] if len(args) > 1 else os.getenv("ADMIN_PASSWORD", "")
    name = args[2] if len(args) > 2 else os.getenv("ADMIN_NAME", "Admin")
    if not email or len(password) < 6:
        sys.exit("Usage: python reset_admin.py <email> <password> [name] (password needs 6+ characters)")
    asyncio.run(reset_admin(email, password, name))
