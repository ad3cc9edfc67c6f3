"""Feature packages (one per persisted entity)."""
