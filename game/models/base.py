"""
Base Game Object Module
Defines the root class shared by the static world objects.
"""


class GameObject:
    """
    Base class for named game objects (Rooms).
    Every object is identified by a stable string oid.
    """
    def __init__(self, oid: str, name: str = "unnamed", description: str = ""):
        self.oid = oid
        self.name = name
        self.description = description

    def look(self) -> str:
        """Return the description seen by the player."""
        return self.description

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.oid!r}>"
