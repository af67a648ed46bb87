"""Report renderers — JSON (CI contract) and Rich terminal summary."""
