"""Domain core: exceptions, roles, permissions and password policy."""
