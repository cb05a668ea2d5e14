"""
models/profile.py
-----------------
Domain model for dog-owner profiles.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Profile:
    """
    A dog-owner profile, keyed by email.

    Attributes:
        email: Owner's email address (identifier).
        dog_name: The dog's name.
        breed: The dog's breed.
        description: Free-text description shown on the profile.
        owner_name: The owner's display name.
        image_link: URL of the profile picture.
    """
    email: str
    dog_name: Optional[str] = None
    breed: Optional[str] = None
    description: Optional[str] = None
    owner_name: Optional[str] = None
    image_link: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.dog_name} ({self.breed}) | {self.owner_name} <{self.email}>"
