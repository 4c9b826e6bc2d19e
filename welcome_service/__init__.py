"""CI welcome service package."""
