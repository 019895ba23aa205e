"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested with mocked collaborators (AsyncMock backends,
Mock audit loggers). Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_domain_records.py: Records and collection wrappers
    - test_membership_join.py: Indexed membership/user join
    - test_user_search_filter.py: Name/email search
    - test_membership_pipeline.py: Fetch orchestration
    - test_config_loader.py: Configuration loading/validation
    - test_in_memory_backend.py: Development backend
    - test_observability_manager.py: Structured events and metrics
"""
