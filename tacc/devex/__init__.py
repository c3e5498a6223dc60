"""Developer tooling built on the tacc compiler front end."""
