"""OutputHash test package."""
