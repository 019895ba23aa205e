"""
Integration Tests - End-to-End Service Tests.

These tests run the MembershipService over the InMemoryMembershipBackend
to exercise fetch, join and filter together without a real backend.

Test Files:
    - test_membership_service.py: Full request workflow
"""
