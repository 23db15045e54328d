"""
Bucket list models.
"""

from typing import Optional
from pydantic import Field

from lovenest.models.common import LoveNestModel, UserRef


class BucketlistItem(LoveNestModel):
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    type: str = "personal"  # "personal" | "shared"
    is_completed: bool = False
    completed_at: Optional[str] = None
    target_date: Optional[str] = None
    created_by: Optional[UserRef] = None


class BucketlistStats(LoveNestModel):
    total: int = 0
    completed: int = 0
    progress: int = 0


class Bucketlist(LoveNestModel):
    items: list[BucketlistItem] = []
    stats: BucketlistStats = BucketlistStats()
