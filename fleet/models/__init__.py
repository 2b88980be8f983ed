# models/__init__.py
from .core import Driver
