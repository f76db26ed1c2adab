"""Claude Code Projects: a terminal picker for local project directories."""
