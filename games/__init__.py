"""Games built on the clicker framework."""
