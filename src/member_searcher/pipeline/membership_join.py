"""
Membership Join.

Inner join of memberships and users on ``membership.user_id == user.id``.

The users are indexed once (id -> User) so the join is O(M + U).
Memberships without a matching user are dropped; they are not errors.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from member_searcher.domain.entities import Membership, User, UserMembership
from member_searcher.domain.value_objects import UserIndex

logger = logging.getLogger(__name__)

UnmatchedCallback = Callable[[Membership], None]


def build_user_index(users: Iterable[User], warn_on_duplicates: bool = True) -> UserIndex:
    """
    Index users by id.

    The first user seen for an id wins, matching a first-match scan
    over the original sequence.

    Args:
        users: Users in backend order
        warn_on_duplicates: Log a warning for every repeated id

    Returns:
        Dict mapping user id to User
    """
    index: UserIndex = {}
    for user in users:
        if user.id in index:
            if warn_on_duplicates:
                logger.warning(f"Duplicate user id {user.id!r}, keeping first occurrence")
            continue
        index[user.id] = user
    return index


def join_memberships(
    memberships: Iterable[Membership],
    users: Iterable[User],
    *,
    on_unmatched: Optional[UnmatchedCallback] = None,
    warn_on_duplicates: bool = True,
) -> List[UserMembership]:
    """
    Join memberships with the users they reference.

    Args:
        memberships: Memberships in backend order
        users: Users to match against
        on_unmatched: Called with each membership that has no user
        warn_on_duplicates: Passed to build_user_index

    Returns:
        One UserMembership per matched membership, in membership order
    """
    index = build_user_index(users, warn_on_duplicates=warn_on_duplicates)

    joined: List[UserMembership] = []
    for membership in memberships:
        user = index.get(membership.user_id)
        if user is None:
            if on_unmatched is not None:
                on_unmatched(membership)
            continue
        joined.append(UserMembership.from_membership(membership, user))

    return joined
