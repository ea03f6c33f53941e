"""Test suite for the Story Spoiler API integration suite.

Test structure:
- unit/: Clients, payloads, config, logging and cases with mocked HTTP
- integration/: The full ordered run against an in-process fake API
- smoke/: The ordered run against the remote API (requires --live)
"""
