"""tacc Language Server Protocol support."""
