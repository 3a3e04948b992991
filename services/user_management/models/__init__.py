from .users import User, UserRole, UserStatus
