"""Board widgets: scene, view and piece items."""
