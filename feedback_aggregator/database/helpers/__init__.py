"""
The `helpers` package provides utilities that support database operations.

Contents
--------
- transactionManagement
    - Context variable (`db_session_context`) propagating the active session across function calls
    - `@transactional` decorator:
        - Reuses an existing session if one is active in context
        - Creates, commits, and closes a new session otherwise
        - Rolls back the session on errors, so a failed reseed leaves prior rows intact
"""
