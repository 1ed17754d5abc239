"""Test configuration and fixtures for the address book API."""

from tests.fixtures import *  # noqa: F401,F403
