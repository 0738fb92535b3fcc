from .database import Base, TeamRecord

__all__ = ["Base", "TeamRecord"]
