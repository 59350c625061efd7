"""Test package for hoop_detective."""
