from .base import Location, Edge
