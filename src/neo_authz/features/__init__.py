"""Feature packages for neo-authz."""
