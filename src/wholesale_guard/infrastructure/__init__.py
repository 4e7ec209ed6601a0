"""Infrastructure layer: in-memory host adapters and store snapshots."""
