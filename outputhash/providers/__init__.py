"""OutputHash providers package."""
