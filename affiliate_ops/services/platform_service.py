"""
Platform service — the reference list of affiliate platforms.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from affiliate_ops.models.platform import Platform
from affiliate_ops.schemas.platform import PlatformCreate


class PlatformService:

    def __init__(self, db: Session):
        self.db = db

    def create_platform(self, request: PlatformCreate) -> Platform:
        """Create a platform. Slugs are unique."""
        existing = self.db.execute(
            select(Platform).where(Platform.slug == request.slug)
        ).scalar_one_or_none()

        if existing:
            raise ValueError(f"Platform with slug '{request.slug}' already exists")

        platform = Platform(**request.model_dump())
        self.db.add(platform)
        self.db.flush()
        return platform

    def get_platform(self, platform_id: str) -> Platform:
        platform = self.db.get(Platform, platform_id)
        if not platform:
            raise ValueError(f"Platform {platform_id} not found")
        return platform

    def get_by_slug(self, slug: str) -> Platform:
        platform = self.db.execute(
            select(Platform).where(Platform.slug == slug)
        ).scalar_one_or_none()
        if not platform:
            raise ValueError(f"Platform '{slug}' not found")
        return platform

    def list_platforms(self) -> list[Platform]:
        platforms = self.db.execute(
            select(Platform).order_by(Platform.name)
        ).scalars().all()
        return list(platforms)
