"""Test support code: fakes and helpers shared by the unit tests."""
