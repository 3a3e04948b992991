from .settings import Setting
