"""Object Clicker - click the target before the clock runs out."""
