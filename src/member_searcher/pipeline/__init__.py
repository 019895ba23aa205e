"""
Pipeline Package - Orchestration and Join.

Components:
    - MembershipPipeline: Sequences the backend fetches, the join and the filter
    - join_memberships / build_user_index: Indexed inner join on user id

The pipeline is responsible for:
    - Fetching memberships, then users (skipped when there are no memberships)
    - Joining memberships with their users
    - Applying the user search filter on request
    - Reporting fetch timings and counts

Design Principles:
    - All dependencies injected via constructor
    - Stateless per request
    - Backend failures propagate unchanged
"""

from member_searcher.pipeline.membership_join import build_user_index, join_memberships
from member_searcher.pipeline.membership_pipeline import MembershipPipeline

__all__ = ["MembershipPipeline", "build_user_index", "join_memberships"]
