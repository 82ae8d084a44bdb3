"""Event to line-protocol translation core."""
