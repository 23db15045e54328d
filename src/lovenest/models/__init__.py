from lovenest.models.common import LoveNestModel, Pagination, UserRef
from lovenest.models.user import (
    AuthResponse,
    Couple,
    InviteInfo,
    InviteResponse,
    MeResponse,
    Partner,
    User,
)
from lovenest.models.memory import Memory, MemoryPage
from lovenest.models.event import Event, EventList
from lovenest.models.wishlist import WishlistItem, WishlistItems
from lovenest.models.bucketlist import Bucketlist, BucketlistItem, BucketlistStats
from lovenest.models.journal import JournalEntry, JournalPage

__all__ = [
    "LoveNestModel",
    "Pagination",
    "UserRef",
    "AuthResponse",
    "Couple",
    "InviteInfo",
    "InviteResponse",
    "MeResponse",
    "Partner",
    "User",
    "Memory",
    "MemoryPage",
    "Event",
    "EventList",
    "WishlistItem",
    "WishlistItems",
    "Bucketlist",
    "BucketlistItem",
    "BucketlistStats",
    "JournalEntry",
    "JournalPage",
]
