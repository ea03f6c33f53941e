"""Test doubles for the remote Story Spoiler API."""
